"""Vertex entity and the traversal color it carries.

Colors follow the usual DFS marking:
  UNVISITED -- not reached by the current traversal
  VISITING  -- on the traversal stack right now
  DONE      -- fully explored and popped off the stack

Color is transient: it belongs to whichever traversal is running, and
Graph.reset_colors() puts every vertex back to UNVISITED.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Color(Enum):
    UNVISITED = auto()
    VISITING = auto()
    DONE = auto()


@dataclass(slots=True)
class Vertex:
    id: int
    color: Color = Color.UNVISITED

    def reset(self) -> None:
        self.color = Color.UNVISITED

    def __repr__(self) -> str:
        return f"Vertex({self.id}, {self.color.name})"
