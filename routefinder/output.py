"""Rendering and writing the longest route."""

import logging
from pathlib import Path
from typing import Sequence, Union

from jinja2 import Environment, PackageLoader

from routefinder.search import RouteStop

DEFAULT_OUTPUT = "output.txt"
SEPARATOR = " -> "

_env = Environment(loader=PackageLoader("routefinder", "templates"))


def render_route(route: Sequence[RouteStop], separator: str = SEPARATOR) -> str:
    """Render the route payloads joined by separator.

    Stops without a payload are rendered by their identifier.
    """
    template = _env.get_template("route.txt.jinja")
    return template.render(route=route, separator=separator)


def resolve_output(path: Union[str, Path, None] = None) -> Path:
    """Get the output file path.

    Defaults to output.txt in the current directory. If path is a directory,
    the default file name is used inside it.
    """
    if path is None:
        return Path(DEFAULT_OUTPUT)
    path = Path(path)
    if path.is_dir():
        return path / DEFAULT_OUTPUT
    return path


def write_route(
    route: Sequence[RouteStop],
    path: Union[str, Path, None] = None,
    separator: str = SEPARATOR,
    encoding: str = "utf-8",
) -> Path:
    """Render the route and write it to a file. Returns the path written."""
    out = resolve_output(path)
    text = render_route(route, separator)
    with open(out, "w", encoding=encoding) as f:
        f.write(text)
    logging.info("wrote route of %d stops to %s", len(route), out)
    return out
