"""Admonition stage: claims ``:::note``-style container directives.

An example of an upstream stage. It does not render anything; it attaches
the hast hints a renderer would use (``hName``/``hProperties``), which is
also what marks the directive as handled for the unused directive pass.

Example:
:::tip
Helpful content.
:::

Thread Safety:
Stateless after construction. Safe for concurrent use across threads.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from colonmark.file import DocumentFile
from colonmark.nodes import Directive, DirectiveKind, Node
from colonmark.visitor import visit

# Admonition keywords claimed by default
ADMONITION_TYPES = frozenset(
    [
        "note",
        "tip",
        "info",
        "warning",
        "danger",
        "caution",
    ]
)


def mark_handled(node: Directive, **data: Any) -> Directive:
    """Claim a directive by merging ``data`` into its annotation.

    Any stage that consumes a directive should call this (or set
    ``node.data`` itself) so later stages know the directive was used.
    """
    node.data = {**(node.data or {}), **data}
    if not node.data:
        node.data = {"handled": True}
    return node


class Admonitions:
    """Transformer that claims admonition container directives."""

    __slots__ = ("keywords",)

    def __init__(self, keywords: Iterable[str] = ADMONITION_TYPES) -> None:
        self.keywords = frozenset(keywords)

    def __call__(self, tree: Node, file: DocumentFile) -> None:
        def claim(node: Node, parent: object, index: object) -> None:
            assert isinstance(node, Directive)
            if node.kind is not DirectiveKind.CONTAINER or node.name not in self.keywords:
                return
            mark_handled(
                node,
                hName="admonition",
                hProperties={"type": node.name, **(node.attributes or {})},
            )

        visit(tree, Directive, claim)


__all__ = ["ADMONITION_TYPES", "Admonitions", "mark_handled"]
