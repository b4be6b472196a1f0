"""Tree traversal utilities for colonmark.

Provides a pre-order walker and a ``visit`` helper modelled on
unist-util-visit: a callback runs for every node matching a test, in
document order, and may replace the node it was called with.

Example — collect every directive name:

    names: list[str] = []
    visit(tree, Directive, lambda node, parent, index: names.append(node.name))

Example — turn inline code into plain text:

    def demote(node, parent, index):
        return Text(value=node.value, position=node.position)

    visit(tree, InlineCode, demote)

Thread Safety:
    Walks mutate nothing by themselves. A callback that replaces nodes
    mutates the tree, so a tree must not be shared between concurrent walks.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeAlias

from colonmark.nodes import Node, Parent

Test: TypeAlias = str | type[Node] | Callable[[Node], bool] | tuple[Any, ...] | list[Any] | None
Visitor: TypeAlias = Callable[[Node, Parent | None, int | None], Node | None]


def convert_test(test: Test) -> Callable[[Node], bool]:
    """Turn a node test into a predicate.

    Accepts ``None`` (matches everything), an mdast type name, a node class,
    a predicate, or a tuple/list combining any of those.

    Raises:
        TypeError: If the test has an unsupported type.

    """
    match test:
        case None:
            return lambda node: True
        case str():
            return lambda node: node.type == test
        case type():
            return lambda node: isinstance(node, test)
        case tuple() | list():
            checks = tuple(convert_test(item) for item in test)
            return lambda node: any(check(node) for check in checks)
        case _ if callable(test):
            return test
        case _:
            msg = f"Unsupported node test: {test!r}"
            raise TypeError(msg)


def walk(tree: Node) -> Iterator[tuple[Node, Parent | None, int | None]]:
    """Yield ``(node, parent, index)`` for every node, pre-order.

    Children are read by index at the time they are reached, so replacing
    ``parent.children[index]`` while the generator is suspended on that
    node makes the walk descend into the replacement.

    """
    yield tree, None, None
    # One (parent, next child index) entry per open level
    stack: list[tuple[Parent, int]] = [(tree, 0)] if isinstance(tree, Parent) else []
    while stack:
        parent, index = stack[-1]
        if index >= len(parent.children):
            stack.pop()
            continue
        stack[-1] = (parent, index + 1)
        yield parent.children[index], parent, index
        # Re-read: the consumer may have replaced the child
        child = parent.children[index]
        if isinstance(child, Parent):
            stack.append((child, 0))


def visit(tree: Node, test: Test, visitor: Visitor) -> None:
    """Call ``visitor(node, parent, index)`` for each node matching ``test``.

    Nodes are visited depth-first in document order, each exactly once.
    When the visitor returns a node, it replaces the visited node in its
    parent's ``children`` with a single assignment and the walk continues
    into the replacement.

    Raises:
        TypeError: If the visitor tries to replace the root node.

    """
    matches = convert_test(test)
    for node, parent, index in walk(tree):
        if not matches(node):
            continue
        replacement = visitor(node, parent, index)
        if replacement is None or replacement is node:
            continue
        if parent is None or index is None:
            msg = "visitor cannot replace the root node"
            raise TypeError(msg)
        parent.children[index] = replacement


__all__ = ["Test", "Visitor", "convert_test", "visit", "walk"]
