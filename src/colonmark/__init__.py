"""
colonmark — unused directive detection for Markdown syntax trees.

Finds ``:name``, ``::name`` and ``:::name`` directives that no stage of a
Markdown build claimed, turns the harmless ones back into text and reports
the rest once per document.

Quick Start:
    >>> from colonmark import DocumentFile, Processor, Admonitions, UnusedDirectives
    >>> processor = Processor().use(Admonitions()).use(UnusedDirectives())
    >>> processor.run(tree, DocumentFile.for_compiler("docs/intro.md", "client"))

Warnings go to the ``colonmark.diagnostics`` logger unless a sink is given.
"""

from colonmark.config import (
    DiagnosticsConfig,
    diagnostics_config_context,
    get_diagnostics_config,
    reset_diagnostics_config,
    set_diagnostics_config,
)
from colonmark.diagnostics import CollectingSink, DiagnosticSink, LoggerSink
from colonmark.errors import ColonmarkError, DirectiveContractError, SerializationError
from colonmark.file import DocumentFile
from colonmark.location import Point, Position
from colonmark.nodes import Directive, DirectiveKind, Node, Parent, Root, Text
from colonmark.processor import Processor
from colonmark.transforms import (
    Admonitions,
    DirectiveStatus,
    UnusedDirectives,
    classify_directive,
    mark_handled,
    remove_unused_directives,
)
from colonmark.visitor import visit, walk

__version__ = "0.1.0"

__all__ = [
    "Admonitions",
    "CollectingSink",
    "ColonmarkError",
    "DiagnosticSink",
    "DiagnosticsConfig",
    "Directive",
    "DirectiveContractError",
    "DirectiveKind",
    "DirectiveStatus",
    "DocumentFile",
    "LoggerSink",
    "Node",
    "Parent",
    "Point",
    "Position",
    "Processor",
    "Root",
    "SerializationError",
    "Text",
    "UnusedDirectives",
    "__version__",
    "classify_directive",
    "diagnostics_config_context",
    "get_diagnostics_config",
    "mark_handled",
    "remove_unused_directives",
    "reset_diagnostics_config",
    "set_diagnostics_config",
    "visit",
    "walk",
]
