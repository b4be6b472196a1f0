"""Unused directive detection.

Runs after every other transform. Any directive still lacking ``data`` at
that point was not claimed by a stage, which usually means a typo or a
missing extension, and would otherwise render incorrectly without a word.

Two outcomes per unused directive:

- A simple text directive (``:name`` with no label and no attributes) is
  turned back into the literal text ``:name``. Authors commonly write such
  tokens on purpose (times like 10:30, emoji-like shortcodes).
- Everything else is left as is and listed in a single warning for the
  document.

Only the reporting build pass (``"client"`` by default) emits the warning,
so a document compiled by several passes is reported once.

Example:
    >>> from colonmark import DocumentFile, remove_unused_directives
    >>> file = DocumentFile.for_compiler("docs/intro.md", "client")
    >>> unused = remove_unused_directives(tree, file)

"""

from __future__ import annotations

import os
from collections.abc import Sequence
from enum import Enum
from pathlib import PurePath

from colonmark.config import DiagnosticsConfig, get_diagnostics_config
from colonmark.diagnostics import DiagnosticSink, LoggerSink
from colonmark.errors import DirectiveContractError
from colonmark.file import DocumentFile
from colonmark.location import format_position_suffix
from colonmark.nodes import DIRECTIVE_PREFIXES, Directive, DirectiveKind, Node, Parent, Text
from colonmark.utils.logger import get_logger
from colonmark.visitor import visit

logger = get_logger(__name__)


class DirectiveStatus(Enum):
    """How the unused directive pass treats a directive."""

    HANDLED = "handled"
    UNUSED_SIMPLE_TEXT = "unused-simple-text"
    UNUSED_OTHER = "unused-other"


# =============================================================================
# Classification
# =============================================================================


def is_handled(node: Directive) -> bool:
    """A directive is handled when some stage attached data to it."""
    return bool(node.data)


def is_simple_text_directive(node: Directive) -> bool:
    """Text directive without attributes and without a label."""
    if node.kind is not DirectiveKind.TEXT:
        return False
    return not node.attributes and not node.children


def classify_directive(node: Directive) -> DirectiveStatus:
    if is_handled(node):
        return DirectiveStatus.HANDLED
    if is_simple_text_directive(node):
        return DirectiveStatus.UNUSED_SIMPLE_TEXT
    return DirectiveStatus.UNUSED_OTHER


# =============================================================================
# Rewriting
# =============================================================================


def rewrite_simple_text_directive(node: Directive, parent: Parent, index: int) -> Text:
    """Replace ``parent.children[index]`` with the literal text ``:name``.

    Label and attributes are dropped; there are none for simple directives.

    Returns:
        The Text node now stored in the parent.
    """
    text = Text(value=f"{DirectiveKind.TEXT.prefix}{node.name}", position=node.position)
    parent.children[index] = text
    return text


# =============================================================================
# Reporting
# =============================================================================


def format_directive_name(node: Directive) -> str:
    """Render ``<prefix><name>``, e.g. ``:::tip``.

    Labels and attributes are never shown, to keep reports compact.

    Raises:
        DirectiveContractError: If the directive kind has no known prefix.
    """
    prefix = DIRECTIVE_PREFIXES.get(node.kind)
    if not prefix:
        raise DirectiveContractError(
            node.name,
            f"unexpected, no prefix found for directive of type {node.kind!r}",
            node.position,
        )
    return f"{prefix}{node.name}"


def format_unused_directive_entry(node: Directive) -> str:
    return f"- {format_directive_name(node)}{format_position_suffix(node)}"


def format_report_path(file_path: str | os.PathLike[str], cwd: str | None = None) -> str:
    """Path of the document relative to ``cwd``, with forward slashes."""
    base = cwd if cwd is not None else os.getcwd()
    path = os.path.join(base, os.fspath(file_path))
    try:
        relative = os.path.relpath(path, base)
    except ValueError:
        # Different drives on Windows: no relative form exists
        return PurePath(path).as_posix()
    return relative.replace(os.sep, "/")


def format_unused_directives_message(
    directives: Sequence[Directive],
    file_path: str | os.PathLike[str],
    *,
    cwd: str | None = None,
    support_url: str | None = None,
) -> str:
    """Build the multi-line warning for one document.

    Format:
        Found 2 unused Markdown directives in file docs/intro.md
        - :::tip (at line 3, column 1)
        - ::video
        Your content might render in an unexpected way. Visit <url> ...

    """
    config = get_diagnostics_config()
    if support_url is None:
        support_url = config.support_url
    if cwd is None:
        cwd = config.cwd

    count = len(directives)
    noun = "directive" if count == 1 else "directives"
    title = f"Found {count} unused Markdown {noun} in file {format_report_path(file_path, cwd)}"
    entries = [format_unused_directive_entry(directive) for directive in directives]
    footer = (
        f"Your content might render in an unexpected way. "
        f"Visit {support_url} to find out why and how to fix it."
    )
    return "\n".join([title, *entries, footer])


def maybe_report(
    directives: Sequence[Directive],
    file_path: str | os.PathLike[str],
    compiler_name: str | None,
    *,
    sink: DiagnosticSink | None = None,
    config: DiagnosticsConfig | None = None,
) -> bool:
    """Emit one warning for ``directives`` if this pass is the reporting one.

    Returns:
        True if a warning was sent to the sink.
    """
    if not directives:
        return False
    config = config or get_diagnostics_config()
    if compiler_name != config.reporting_compiler:
        logger.debug(
            "Suppressed %d unused directive(s) in %s for compiler %r",
            len(directives),
            file_path,
            compiler_name,
        )
        return False
    message = format_unused_directives_message(
        directives,
        file_path,
        cwd=config.cwd if config.cwd is not None else os.getcwd(),
        support_url=config.support_url,
    )
    (sink or LoggerSink()).warn(message)
    return True


# =============================================================================
# Transform
# =============================================================================


def _directive_test(node: Node) -> bool:
    return isinstance(node, Directive)


class UnusedDirectives:
    """Transformer that rewrites simple text directives and reports the rest.

    Register it after every stage that may claim directives. Instances keep
    no per-document state and can be reused across documents and threads.

    """

    __slots__ = ("_sink", "_config")

    def __init__(
        self,
        sink: DiagnosticSink | None = None,
        config: DiagnosticsConfig | None = None,
    ) -> None:
        self._sink = sink
        self._config = config

    def __call__(self, tree: Node, file: DocumentFile) -> list[Directive]:
        """Process one document.

        Returns:
            The unused non-simple directives, in document order.
        """
        unused: list[Directive] = []

        def on_directive(node: Node, parent: Parent | None, index: int | None) -> Node | None:
            assert isinstance(node, Directive)
            match classify_directive(node):
                case DirectiveStatus.HANDLED:
                    return None
                case DirectiveStatus.UNUSED_SIMPLE_TEXT:
                    if parent is None or index is None:
                        # The tree itself; there is no slot to rewrite
                        logger.debug("Left parentless text directive :%s as is", node.name)
                        return None
                    logger.debug("Rewrote unused text directive :%s to text", node.name)
                    return rewrite_simple_text_directive(node, parent, index)
                case _:
                    unused.append(node)
                    return None

        visit(tree, _directive_test, on_directive)

        maybe_report(
            unused,
            file.path,
            file.compiler_name,
            sink=self._sink,
            config=self._config,
        )
        return unused


def remove_unused_directives(
    tree: Node,
    file: DocumentFile,
    *,
    sink: DiagnosticSink | None = None,
    config: DiagnosticsConfig | None = None,
) -> list[Directive]:
    """Functional form of :class:`UnusedDirectives`."""
    return UnusedDirectives(sink=sink, config=config)(tree, file)


__all__ = [
    "DirectiveStatus",
    "UnusedDirectives",
    "classify_directive",
    "format_directive_name",
    "format_report_path",
    "format_unused_directive_entry",
    "format_unused_directives_message",
    "is_handled",
    "is_simple_text_directive",
    "maybe_report",
    "remove_unused_directives",
    "rewrite_simple_text_directive",
]
