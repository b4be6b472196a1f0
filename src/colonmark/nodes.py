"""Syntax tree nodes for colonmark.

Nodes follow the mdast vocabulary (https://github.com/syntax-tree/mdast) so
trees produced by an external Markdown parser map onto them one to one.
Unlike a rendering AST, these nodes are mutable: transforms rewrite the tree
in place, and the only structural edit they perform is replacing a child in
its parent's ``children`` list.

Node Hierarchy:
Node (base)
├── Parent (nodes with children)
│   ├── Root
│   ├── Paragraph
│   ├── Heading
│   ├── Blockquote
│   ├── List
│   ├── ListItem
│   ├── Emphasis
│   ├── Strong
│   ├── Link
│   └── Directive (container / leaf / text)
├── Literal (nodes with a value)
│   ├── Text
│   ├── InlineCode
│   ├── Code
│   └── Html
├── Image
├── Break
└── ThematicBreak

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from colonmark.location import Position

# =============================================================================
# Base Nodes
# =============================================================================


@dataclass(slots=True, kw_only=True)
class Node:
    """Base class for all syntax tree nodes.

    ``type`` is the mdast node type name used for serialization.

    """

    type: ClassVar[str] = "node"

    position: Position | None = None


@dataclass(slots=True, kw_only=True)
class Parent(Node):
    """A node that contains other nodes."""

    children: list[Node] = field(default_factory=list)


@dataclass(slots=True, kw_only=True)
class Literal(Node):
    """A node that carries a string value."""

    value: str = ""


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(slots=True, kw_only=True)
class Root(Parent):
    """Document root."""

    type: ClassVar[str] = "root"


@dataclass(slots=True, kw_only=True)
class Paragraph(Parent):
    type: ClassVar[str] = "paragraph"


@dataclass(slots=True, kw_only=True)
class Heading(Parent):
    """ATX or setext heading.

    Markdown: ## Title

    """

    type: ClassVar[str] = "heading"

    depth: int = 1


@dataclass(slots=True, kw_only=True)
class Blockquote(Parent):
    type: ClassVar[str] = "blockquote"


@dataclass(slots=True, kw_only=True)
class List(Parent):
    type: ClassVar[str] = "list"

    ordered: bool = False
    start: int | None = None


@dataclass(slots=True, kw_only=True)
class ListItem(Parent):
    type: ClassVar[str] = "listItem"


@dataclass(slots=True, kw_only=True)
class Code(Literal):
    """Fenced or indented code block."""

    type: ClassVar[str] = "code"

    lang: str | None = None


@dataclass(slots=True, kw_only=True)
class Html(Literal):
    type: ClassVar[str] = "html"


@dataclass(slots=True, kw_only=True)
class ThematicBreak(Node):
    type: ClassVar[str] = "thematicBreak"


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(slots=True, kw_only=True)
class Text(Literal):
    """Plain text content.

    The most common inline node, representing literal text.

    """

    type: ClassVar[str] = "text"


@dataclass(slots=True, kw_only=True)
class Emphasis(Parent):
    type: ClassVar[str] = "emphasis"


@dataclass(slots=True, kw_only=True)
class Strong(Parent):
    type: ClassVar[str] = "strong"


@dataclass(slots=True, kw_only=True)
class Link(Parent):
    type: ClassVar[str] = "link"

    url: str = ""
    title: str | None = None


@dataclass(slots=True, kw_only=True)
class Image(Node):
    type: ClassVar[str] = "image"

    url: str = ""
    alt: str | None = None
    title: str | None = None


@dataclass(slots=True, kw_only=True)
class InlineCode(Literal):
    type: ClassVar[str] = "inlineCode"


@dataclass(slots=True, kw_only=True)
class Break(Node):
    """Hard line break."""

    type: ClassVar[str] = "break"


# =============================================================================
# Directives
# =============================================================================


class DirectiveKind(Enum):
    """The three directive shapes, valued by their mdast type names."""

    CONTAINER = "containerDirective"
    LEAF = "leafDirective"
    TEXT = "textDirective"

    @property
    def prefix(self) -> str:
        return DIRECTIVE_PREFIXES[self]


DIRECTIVE_PREFIXES: dict[DirectiveKind, str] = {
    DirectiveKind.TEXT: ":",
    DirectiveKind.LEAF: "::",
    DirectiveKind.CONTAINER: ":::",
}


@dataclass(slots=True, kw_only=True)
class Directive(Parent):
    """Generic directive (remark-directive syntax).

    Markdown:
        :name[label]{key=value}        text directive
        ::name[label]{key=value}       leaf directive
        :::name[label]{key=value}      container directive

    ``children`` holds the label (text/leaf) or the body (container).
    ``data`` is an opaque annotation that any stage may attach to claim the
    directive; a directive without data has not been handled by anything.

    """

    kind: DirectiveKind
    name: str
    attributes: dict[str, str] | None = None
    data: dict[str, Any] | None = None

    @property
    def type(self) -> str:  # type: ignore[override]
        return self.kind.value


DIRECTIVE_TYPES: tuple[str, ...] = tuple(kind.value for kind in DirectiveKind)


# Registry of mdast type names to classes (directives are resolved by kind)
NODE_TYPES: dict[str, type[Node]] = {
    cls.type: cls
    for cls in (
        Root,
        Paragraph,
        Heading,
        Blockquote,
        List,
        ListItem,
        Code,
        Html,
        ThematicBreak,
        Text,
        Emphasis,
        Strong,
        Link,
        Image,
        InlineCode,
        Break,
    )
}
