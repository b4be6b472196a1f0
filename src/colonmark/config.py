"""ContextVar-based diagnostics configuration for colonmark.

Provides per-context configuration using Python's ContextVars (PEP 567).
Build tools set the config once per build; every transform running in that
context reads it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so concurrent build passes can carry different configurations.

Usage:
    from colonmark.config import DiagnosticsConfig, diagnostics_config_context

    with diagnostics_config_context(DiagnosticsConfig(reporting_compiler="server")):
        remove_unused_directives(tree, file)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

DEFAULT_REPORTING_COMPILER = "client"
DEFAULT_SUPPORT_URL = "https://github.com/facebook/docusaurus/pull/9394"


@dataclass(frozen=True, slots=True)
class DiagnosticsConfig:
    """Immutable diagnostics configuration.

    Attributes:
        reporting_compiler: The only build identity allowed to emit warnings
        support_url: Link printed at the end of every unused directive report
        cwd: Base directory for relative paths in reports (None = os.getcwd())

    """

    reporting_compiler: str = DEFAULT_REPORTING_COMPILER
    support_url: str = DEFAULT_SUPPORT_URL
    cwd: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> DiagnosticsConfig:
        """Create DiagnosticsConfig from dictionary.

        Only includes keys that are valid DiagnosticsConfig fields; unknown
        keys are silently ignored.

        Example:
            >>> config = DiagnosticsConfig.from_dict({
            ...     "reporting_compiler": "server",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.reporting_compiler
            'server'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: DiagnosticsConfig = DiagnosticsConfig()

_diagnostics_config: ContextVar[DiagnosticsConfig] = ContextVar(
    "diagnostics_config",
    default=_DEFAULT_CONFIG,
)


def get_diagnostics_config() -> DiagnosticsConfig:
    """Get current diagnostics configuration (thread-local)."""
    return _diagnostics_config.get()


def set_diagnostics_config(config: DiagnosticsConfig) -> None:
    """Set diagnostics configuration for current context.

    Args:
        config: DiagnosticsConfig instance to use for this context.

    """
    _diagnostics_config.set(config)


def reset_diagnostics_config() -> None:
    """Reset to default configuration."""
    _diagnostics_config.set(_DEFAULT_CONFIG)


@contextmanager
def diagnostics_config_context(config: DiagnosticsConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with diagnostics_config_context(DiagnosticsConfig(cwd="/site")):
        ...     get_diagnostics_config().cwd
        '/site'

    """
    previous = _diagnostics_config.get()
    _diagnostics_config.set(config)
    try:
        yield
    finally:
        _diagnostics_config.set(previous)


__all__ = [
    "DEFAULT_REPORTING_COMPILER",
    "DEFAULT_SUPPORT_URL",
    "DiagnosticsConfig",
    "diagnostics_config_context",
    "get_diagnostics_config",
    "reset_diagnostics_config",
    "set_diagnostics_config",
]
