"""Per-document processing context.

A DocumentFile travels with a tree through every transform. It carries the
document path and a free-form ``data`` mapping that build tools fill in;
``data["compilerName"]`` is the build identity that tells concurrent passes
over the same document apart (e.g. "client" and "server").

"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class DocumentFile:
    """The document being processed.

    Attributes:
        path: Absolute or project-relative path of the source document
        data: Build metadata shared between transforms

    """

    path: str
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_compiler(cls, path: str | os.PathLike[str], compiler_name: str) -> DocumentFile:
        """Create a file context for one build pass."""
        return cls(path=os.fspath(path), data={"compilerName": compiler_name})

    @property
    def compiler_name(self) -> str | None:
        """Build identity of the pass processing this document, if any."""
        return self.data.get("compilerName")


__all__ = ["DocumentFile"]
