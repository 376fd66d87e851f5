"""Reading edge files and asking the user for a query pair.

An edge file is any whitespace-separated list of integers, read two at
a time as (source, destination).  Line breaks carry no meaning.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from graphwalk.graph.adjacency import Graph, InvalidInputError

log = logging.getLogger(__name__)

PROMPT = "Please enter valid source and destination vertices >> "


class InputFileError(OSError):
    """Raised when the edge file cannot be opened or read."""


def read_tokens(path: str | Path) -> list[str]:
    """Split the file at *path* into whitespace-separated tokens.

    Raises InputFileError if the file cannot be read and
    InvalidInputError if it is not UTF-8 text or the token count is odd.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidInputError(
            f"input file is not text: byte {exc.object[exc.start]:#04x} "
            f"at offset {exc.start}"
        ) from exc
    except OSError as exc:
        raise InputFileError(f"input file cannot be read: {path}") from exc

    tokens = text.split()
    log.debug("read %d tokens from %s", len(tokens), path)
    if len(tokens) % 2 != 0:
        raise InvalidInputError(
            "a vertex in the file maps to nowhere, please check input"
        )
    return tokens


def _parse_pair(line: str) -> tuple[int, int] | None:
    parts = line.split()
    if len(parts) < 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def prompt_source_dest(
    graph: Graph,
    input_fn: Callable[[str], str] = input,
) -> tuple[int, int]:
    """Prompt until the user types two integers, then validate them.

    Lines that do not start with two integers are asked again.  A
    well-formed pair naming a missing vertex raises VertexNotFoundError
    rather than prompting again.  EOFError from *input_fn* propagates.
    """
    while True:
        pair = _parse_pair(input_fn(PROMPT))
        if pair is not None:
            return graph.find_vertices_by_id(*pair)
        log.debug("could not parse a vertex pair, asking again")
