"""Tests for edge-file reading and the source/destination prompt."""
from __future__ import annotations

from pathlib import Path

import pytest

from graphwalk.graph.adjacency import Graph, InvalidInputError, VertexNotFoundError
from graphwalk.reader import PROMPT, InputFileError, prompt_source_dest, read_tokens


def _answers(*lines: str):
    it = iter(lines)
    prompts: list[str] = []

    def _input(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _input, prompts


class TestReadTokens:
    def test_splits_on_any_whitespace(self, tmp_path: Path) -> None:
        f = tmp_path / "edges.txt"
        f.write_text("0 1\n1\t2\n\n  2 0  \n")
        assert read_tokens(f) == ["0", "1", "1", "2", "2", "0"]

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        f = tmp_path / "edges.txt"
        f.write_text("0 1")
        assert read_tokens(str(f)) == ["0", "1"]

    def test_empty_file(self, tmp_path: Path) -> None:
        f = tmp_path / "edges.txt"
        f.write_text("")
        assert read_tokens(f) == []

    def test_odd_count(self, tmp_path: Path) -> None:
        f = tmp_path / "edges.txt"
        f.write_text("0 1 2")
        with pytest.raises(InvalidInputError, match="maps to nowhere"):
            read_tokens(f)

    def test_binary_file(self, tmp_path: Path) -> None:
        f = tmp_path / "edges.bin"
        f.write_bytes(b"0 1 1 \xff")
        with pytest.raises(InvalidInputError, match="not text: byte 0xff at offset 6"):
            read_tokens(f)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InputFileError, match="cannot be read"):
            read_tokens(tmp_path / "nope.txt")

    def test_missing_file_is_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            read_tokens(tmp_path / "nope.txt")

    def test_non_integers_left_to_graph_build(self, tmp_path: Path) -> None:
        f = tmp_path / "edges.txt"
        f.write_text("0 x")
        tokens = read_tokens(f)
        with pytest.raises(InvalidInputError, match="not an integer"):
            Graph.build(tokens)


class TestPromptSourceDest:
    def test_valid_pair(self, chain_graph: Graph) -> None:
        input_fn, prompts = _answers("0 2")
        assert prompt_source_dest(chain_graph, input_fn) == (0, 2)
        assert prompts == [PROMPT]

    def test_retries_until_two_integers(self, chain_graph: Graph) -> None:
        input_fn, prompts = _answers("", "zero two", "1", "1 2")
        assert prompt_source_dest(chain_graph, input_fn) == (1, 2)
        assert len(prompts) == 4

    def test_extra_tokens_ignored(self, chain_graph: Graph) -> None:
        input_fn, _ = _answers("2 0 junk")
        assert prompt_source_dest(chain_graph, input_fn) == (2, 0)

    def test_missing_vertex_raises(self, chain_graph: Graph) -> None:
        input_fn, prompts = _answers("0 9", "0 1")
        with pytest.raises(VertexNotFoundError):
            prompt_source_dest(chain_graph, input_fn)
        assert len(prompts) == 1

    def test_eof_propagates(self, chain_graph: Graph) -> None:
        input_fn, _ = _answers("bad")
        with pytest.raises(EOFError):
            prompt_source_dest(chain_graph, input_fn)
