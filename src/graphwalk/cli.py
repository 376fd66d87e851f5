"""graphwalk CLI entry point.

Usage: graphwalk run <input_file> [--source N --dest N]
"""
import argparse
import logging
import sys

log = logging.getLogger(__name__)

EXIT_ERROR = 1
EXIT_USAGE = 2


def _add_run_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "run",
        help="Search, close and cycle-check the graph in an edge file.",
    )
    p.add_argument(
        "input_file",
        help="Whitespace-separated (source, destination) vertex pairs.",
    )
    p.add_argument(
        "--source", type=int, default=None,
        help="Search start vertex (default: ask interactively)",
    )
    p.add_argument(
        "--dest", type=int, default=None,
        help="Search target vertex (default: ask interactively)",
    )
    p.add_argument(
        "--no-sync-closure", action="store_true",
        help="Only add closure edges to the matrix, not the adjacency list.",
    )
    p.add_argument(
        "--fast-cycle", action="store_true",
        help="Use the single-pass cycle check instead of one sweep per vertex.",
    )


def _run(args: argparse.Namespace) -> int:
    from graphwalk.graph.adjacency import Graph, InvalidInputError, VertexNotFoundError
    from graphwalk.reader import InputFileError, prompt_source_dest, read_tokens
    from graphwalk.report import analyze, format_report

    try:
        graph = Graph.build(read_tokens(args.input_file))
        log.info("loaded %r from %s", graph, args.input_file)
        if args.source is None or args.dest is None:
            src, dest = prompt_source_dest(graph)
        else:
            src, dest = graph.find_vertices_by_id(args.source, args.dest)
    except (InputFileError, InvalidInputError, VertexNotFoundError) as exc:
        log.error("%s", exc)
        return EXIT_ERROR
    except EOFError:
        log.error("no source and destination vertices given")
        return EXIT_ERROR

    report = analyze(
        graph, src, dest,
        sync_closure=not args.no_sync_closure,
        fast_cycle=args.fast_cycle,
    )
    print(format_report(report))
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="graphwalk",
        description="Depth-first search, transitive closure and cycle "
                    "detection over a directed edge list.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging threshold (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_run_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(EXIT_USAGE)

    if args.command == "run":
        sys.exit(_run(args))
