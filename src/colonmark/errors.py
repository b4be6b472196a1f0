"""Exception classes for colonmark.

Provides standardized exceptions for error handling throughout colonmark.
Unused directives in user content are never errors (they are reported as
warnings); these exceptions signal contract violations between stages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from colonmark.location import Position


class ColonmarkError(Exception):
    """Base exception for all colonmark errors.

    Subclass this for specific error categories.
    """

    pass


class DirectiveContractError(ColonmarkError):
    """Error when a directive node does not have the shape transforms expect.

    Raised when a directive reaches the diagnostics formatter with a kind
    that has no known prefix. This means an upstream parser or stage built
    a malformed node.
    """

    def __init__(
        self,
        directive_name: str,
        message: str,
        position: Position | None = None,
    ) -> None:
        """Initialize directive contract error.

        Args:
            directive_name: Name of the directive (e.g., "note", "tip")
            message: Description of the contract violation
            position: Source position of the directive (optional)
        """
        self.directive_name = directive_name
        self.position = position

        location = f" (line {position.start.line})" if position else ""
        super().__init__(f"Directive '{directive_name}'{location}: {message}")


class SerializationError(ColonmarkError, ValueError):
    """Error when an mdast document cannot be converted to colonmark nodes."""

    pass
