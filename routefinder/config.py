"""Route configuration (routefinder.yml)."""

import logging
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

import yaml

from routefinder.logs import fatal

CONFIG_NAME = "routefinder.yml"


class RouteConfig:

    """Options for reading records and writing the route.

    Every option is a string with a default, so a missing or empty file is a
    valid configuration. Call validate() after loading: it reports unknown keys
    and bad values, and fills in defaults.
    """

    defaults: Dict[str, str] = {
        "delimiter": ";",
        "separator": " -> ",
        "output": "output.txt",
        "encoding": "utf-8",
    }

    def __init__(self, path: Optional[Path], data: Dict[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        return f"RouteConfig(path={self.path!r}, data={self.data!r})"

    @classmethod
    def default(cls) -> "RouteConfig":
        cfg = cls(None, {})
        cfg.validate()
        return cfg

    @classmethod
    def load(cls, path: Path) -> "RouteConfig":
        with open(path) as f:
            return cls.load_from(path, f)

    @classmethod
    def loads(cls, path: Path, content: str) -> "RouteConfig":
        return cls.load_from(path, StringIO(content))

    @classmethod
    def load_from(cls, path: Path, content: TextIO) -> "RouteConfig":
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if data is None:
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data))
            data = {}
        return cls(path, data)

    def validate(self):
        for key in self.data:
            if key not in self.defaults:
                logging.error("%s: unknown key %r", self.path, key)
        merged = dict(self.defaults)
        for key, default in self.defaults.items():
            value = self.data.get(key, default)
            if not isinstance(value, str):
                logging.error("%s: %r must be a string", self.path, key)
                value = default
            merged[key] = value
        if not merged["delimiter"]:
            logging.error("%s: 'delimiter' must not be empty", self.path)
            merged["delimiter"] = self.defaults["delimiter"]
        self.data = merged

    def __getitem__(self, key: str) -> str:
        return self.data[key]

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)


def find_config(path: Optional[Path] = None) -> RouteConfig:
    """Load the configuration.

    Uses path if given, otherwise routefinder.yml in the current directory if
    it exists, otherwise the defaults. Exits with a fatal log if the file
    cannot be read.
    """
    if path is None:
        candidate = Path(CONFIG_NAME)
        if not candidate.is_file():
            logging.debug("no %s found, using defaults", CONFIG_NAME)
            return RouteConfig.default()
        path = candidate
    logging.info("loading config %s", path)
    try:
        cfg = RouteConfig.load(path)
    except OSError as ex:
        fatal("cannot read %s: %s", path, ex)
    cfg.validate()
    logging.debug("config: %r", cfg)
    return cfg
