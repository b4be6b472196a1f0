"""Source positions for error messages and diagnostics.

Provides Point and Position dataclasses mirroring the unist position shape
(``start``/``end`` points with ``line``/``column``/``offset``).

Thread Safety:
Point and Position are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from colonmark.nodes import Node


@dataclass(frozen=True, slots=True)
class Point:
    """A single place in the source document.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Absolute offset in the source buffer (0-indexed, optional)

    """

    line: int
    column: int
    offset: int | None = None

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Position:
    """Location of a node in the source document.

    Examples:
            >>> pos = Position(Point(3, 1), Point(3, 8))
            >>> str(pos)
            '3:1'

    """

    start: Point
    end: Point | None = None

    def __str__(self) -> str:
        return str(self.start)

    @classmethod
    def at(cls, line: int, column: int = 1) -> Position:
        """Create a position that starts (and ends) at a single point."""
        point = Point(line=line, column=column)
        return cls(start=point, end=point)


def format_position_suffix(node: Node) -> str:
    """Render the position part of a diagnostic line.

    Returns:
        ``" (at line L, column C)"``, or an empty string when the node has
        no position metadata.
    """
    if node.position is None:
        return ""
    start = node.position.start
    return f" (at line {start.line}, column {start.column})"
