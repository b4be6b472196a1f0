"""Tree transforms for colonmark.

Each transform is a callable ``(tree, file)`` that mutates the tree in place.

"""

from colonmark.transforms.admonitions import ADMONITION_TYPES, Admonitions, mark_handled
from colonmark.transforms.unused_directives import (
    DirectiveStatus,
    UnusedDirectives,
    classify_directive,
    format_directive_name,
    format_unused_directive_entry,
    format_unused_directives_message,
    maybe_report,
    remove_unused_directives,
)

__all__ = [
    "ADMONITION_TYPES",
    "Admonitions",
    "DirectiveStatus",
    "UnusedDirectives",
    "classify_directive",
    "format_directive_name",
    "format_unused_directive_entry",
    "format_unused_directives_message",
    "mark_handled",
    "maybe_report",
    "remove_unused_directives",
]
