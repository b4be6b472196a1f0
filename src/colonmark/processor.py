"""Transform pipeline.

A Processor runs transformers over a tree in registration order, the way a
Markdown build runs its plugins. Unused directive detection belongs last:

    processor = Processor().use(Admonitions()).use(UnusedDirectives())
    processor.run(tree, DocumentFile.for_compiler("docs/intro.md", "client"))

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeAlias

from colonmark.file import DocumentFile
from colonmark.nodes import Node
from colonmark.utils.logger import get_logger

logger = get_logger(__name__)

Transformer: TypeAlias = Callable[[Node, DocumentFile], Any]


class Processor:
    """Ordered list of transformers."""

    __slots__ = ("_transformers",)

    def __init__(self, transformers: list[Transformer] | None = None) -> None:
        self._transformers: list[Transformer] = list(transformers or [])

    @property
    def transformers(self) -> tuple[Transformer, ...]:
        return tuple(self._transformers)

    def use(self, transformer: Transformer) -> Processor:
        """Append a transformer; returns self for chaining."""
        if not callable(transformer):
            msg = f"Transformer must be callable, got {type(transformer).__name__}"
            raise TypeError(msg)
        self._transformers.append(transformer)
        return self

    def run(self, tree: Node, file: DocumentFile) -> Node:
        """Run every transformer on ``tree`` and return it."""
        for transformer in self._transformers:
            logger.debug("Running %s on %s", type(transformer).__name__, file.path)
            transformer(tree, file)
        return tree


__all__ = ["Processor", "Transformer"]
