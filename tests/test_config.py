"""Tests for ContextVar-based diagnostics configuration."""

from threading import Thread

import pytest

from colonmark.config import (
    DEFAULT_SUPPORT_URL,
    DiagnosticsConfig,
    diagnostics_config_context,
    get_diagnostics_config,
    reset_diagnostics_config,
    set_diagnostics_config,
)


class TestDiagnosticsConfigDataclass:
    def test_default_values(self) -> None:
        config = DiagnosticsConfig()
        assert config.reporting_compiler == "client"
        assert config.support_url == DEFAULT_SUPPORT_URL
        assert config.cwd is None

    def test_immutability(self) -> None:
        config = DiagnosticsConfig()
        with pytest.raises(AttributeError):
            config.reporting_compiler = "server"  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = DiagnosticsConfig.from_dict({"reporting_compiler": "server", "colour": "red"})
        assert config == DiagnosticsConfig(reporting_compiler="server")


class TestContextVarFunctions:
    def test_set_and_reset(self) -> None:
        set_diagnostics_config(DiagnosticsConfig(cwd="/site"))
        assert get_diagnostics_config().cwd == "/site"
        reset_diagnostics_config()
        assert get_diagnostics_config() == DiagnosticsConfig()

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with diagnostics_config_context(DiagnosticsConfig(reporting_compiler="server")):
                assert get_diagnostics_config().reporting_compiler == "server"
                raise RuntimeError
        assert get_diagnostics_config().reporting_compiler == "client"

    def test_thread_isolation(self) -> None:
        results: dict[str, str] = {}

        def worker(name: str) -> None:
            set_diagnostics_config(DiagnosticsConfig(reporting_compiler=name))
            results[name] = get_diagnostics_config().reporting_compiler

        threads = [Thread(target=worker, args=(name,)) for name in ("client", "server", "edge")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {"client": "client", "server": "server", "edge": "edge"}
        assert get_diagnostics_config() == DiagnosticsConfig()
