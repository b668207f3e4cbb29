"""Command-line interface."""

import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any, Mapping, Tuple

from routefinder.config import RouteConfig, find_config
from routefinder.errors import RouteError
from routefinder.graph import RestrictedGraph
from routefinder.logs import fatal, setup_logging
from routefinder.output import render_route, write_route
from routefinder.records import build_graph, read_records
from routefinder.search import find_longest_route


def main():
    parser, commands = get_parser()
    args = parser.parse_args()
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    setup_logging(sys.stderr, args.verbose, args.keep_going)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="routefinder", description="find the longest route between buildings"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_find = commands.add_parser("find", help="find and write the longest route")
    parser_find.add_argument("input", type=Path, help="input records file")
    parser_find.add_argument(
        "output", type=Path, nargs="?", help="output file or directory"
    )
    parser_find.add_argument(
        "-p", "--print", action="store_true", help="also print the route to stdout"
    )

    parser_info = commands.add_parser("info", help="show graph information")
    parser_info.add_argument("input", type=Path, help="input records file")
    parser_info.add_argument(
        "-d", "--dump", action="store_true", help="show every building and its successor"
    )

    for subparser in [parser_find, parser_info]:
        subparser.add_argument(
            "-c", "--config", type=Path, help="config file (default: routefinder.yml)"
        )
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="skip invalid records instead of stopping",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def load_graph(args: Namespace, cfg: RouteConfig) -> RestrictedGraph[str]:
    """Read the input file and build the graph, exiting on errors."""
    try:
        records = read_records(args.input, cfg["delimiter"], cfg["encoding"])
    except OSError as ex:
        fatal("cannot read %s: %s", args.input, ex)
    try:
        return build_graph(records, skip_invalid=args.keep_going)
    except RouteError as ex:
        fatal("%s: %s", args.input, ex)


def command_find(args: Namespace):
    cfg = find_config(args.config)
    graph = load_graph(args, cfg)
    route = find_longest_route(graph)
    output = args.output if args.output is not None else Path(cfg["output"])
    try:
        write_route(route, output, cfg["separator"], cfg["encoding"])
    except OSError as ex:
        fatal("cannot write %s: %s", output, ex)
    if args.print:
        print(render_route(route, cfg["separator"]))


def command_info(args: Namespace):
    cfg = find_config(args.config)
    graph = load_graph(args, cfg)
    route = find_longest_route(graph)
    printer = InfoPrinter()
    printer.topic(args.input)
    printer.item("Buildings", graph.size())
    printer.item("Route starts", len(graph.heads()))
    printer.item("Route ends", len(graph.leaves()))
    printer.item("Longest route", len(route))
    if args.dump:
        print()
        graph.dump(sys.stdout)


class InfoPrinter:

    """Helper class for implementing command_info."""

    def topic(self, s: Any):
        print(s)

    def item(self, label: str, value: Any):
        print(f"    {label}: {value}")
