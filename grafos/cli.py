"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

from grafos import defaults
from grafos.config import CONFIG_NAME, DisplayConfig
from grafos.graph import DirectedGraph
from grafos.logs import fatal, setup_logging
from grafos.render import RenderOptions, print_adjacency_list, print_adjacency_matrix


def main(argv: Optional[Iterable[str]] = None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    log_level = logging.WARNING
    if args.verbose and args.verbose == 1:
        log_level = logging.INFO
    elif args.verbose and args.verbose >= 2:
        log_level = logging.DEBUG
    failure_level = logging.FATAL if args.keep_going else logging.ERROR
    setup_logging(sys.stderr, log_level, failure_level)

    COMMANDS[args.command](args)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="grafos", description="print directed graphs as lists and matrices"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        choices=sorted(COMMANDS),
        help="get help for a specific command",
    )

    parser_init = commands.add_parser("init", help=f"create a default {CONFIG_NAME}")

    parser_demo = commands.add_parser("demo", help="print the demo graph")

    item_help = "edge as SRC:DST, or a lone vertex"
    parser_list = commands.add_parser("list", help="print an adjacency list")
    parser_list.add_argument("items", nargs="+", metavar="item", help=item_help)

    parser_matrix = commands.add_parser("matrix", help="print an adjacency matrix")
    parser_matrix.add_argument("items", nargs="+", metavar="item", help=item_help)

    for subparser in [parser_list, parser_matrix]:
        subparser.add_argument(
            "-n",
            "--numeric",
            action="store_true",
            help="treat digit-only labels as numbers",
        )

    for subparser in [parser_demo, parser_list, parser_matrix]:
        subparser.add_argument(
            "-w", "--width", type=int, help="matrix cell width (overrides config)"
        )

    for subparser in [parser_init, parser_demo, parser_list, parser_matrix]:
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def command_init(args: Namespace):
    path = Path.cwd() / CONFIG_NAME
    try:
        with open(path, "x", encoding="utf-8") as f:
            f.write(defaults.grafos_yml)
    except FileExistsError:
        fatal("%s already exists", path)
    print(f"Created {CONFIG_NAME}")


def command_demo(args: Namespace):
    graph = defaults.demo_graph()
    options = render_options(args, DisplayConfig.find())
    print("Adjacency list:")
    print_adjacency_list(graph, sys.stdout, options)
    print()
    print("Adjacency matrix:")
    print_adjacency_matrix(graph, sys.stdout, options)


def command_list(args: Namespace):
    cfg = DisplayConfig.find()
    graph = build_graph(args.items, args.numeric or cfg["numeric_labels"])
    print_adjacency_list(graph, sys.stdout, render_options(args, cfg))


def command_matrix(args: Namespace):
    cfg = DisplayConfig.find()
    graph = build_graph(args.items, args.numeric or cfg["numeric_labels"])
    print_adjacency_matrix(graph, sys.stdout, render_options(args, cfg))


def render_options(args: Namespace, cfg: DisplayConfig) -> RenderOptions:
    options = RenderOptions.from_config(cfg)
    if args.width is not None:
        if args.width < 1:
            logging.error("width must be positive, got %d", args.width)
        else:
            options = options._replace(cell_width=args.width)
    return options


def parse_label(text: str, numeric: bool) -> Union[str, int]:
    if numeric and text.isascii() and text.isdigit():
        return int(text)
    return text


def build_graph(items: Iterable[str], numeric: bool) -> DirectedGraph:
    """Build a graph from SRC:DST edge items and lone vertex items.

    Malformed items are logged as errors and skipped.
    """
    graph: DirectedGraph = DirectedGraph()
    for item in items:
        parts = item.split(":")
        if len(parts) == 1:
            graph.add_vertex(parse_label(parts[0], numeric))
        elif len(parts) == 2:
            src, dst = (parse_label(p, numeric) for p in parts)
            graph.add_edge(src, dst)
        else:
            logging.error("malformed item %r, expected SRC:DST", item)
    logging.info("built %r", graph)
    return graph


COMMANDS: Dict[str, Callable[[Namespace], None]] = {
    "init": command_init,
    "demo": command_demo,
    "list": command_list,
    "matrix": command_matrix,
}
