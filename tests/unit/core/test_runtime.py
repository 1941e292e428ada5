"""Unit tests for LauncherRuntime environment selection."""

from unittest.mock import patch

import pytest

from launchbridge.config.config import BridgeConfig, LauncherConfig
from launchbridge.core.runtime import LauncherRuntime
from launchbridge.schemas.types import BackendType
from launchbridge.transports.base import UnavailableTransport
from launchbridge.transports.host import HostProcessTransport
from launchbridge.utils.errors import TransportUnavailableError


class TestInstance:
    """Test once-only backend construction."""

    def test_same_instance_every_time(self, make_bridge) -> None:
        runtime = LauncherRuntime(namespace={"Main": make_bridge()})

        backends = [runtime.instance() for _ in range(5)]

        assert all(backend is backends[0] for backend in backends)

    def test_lazy_construction(self) -> None:
        runtime = LauncherRuntime(namespace={})
        assert runtime.initialized is False

        runtime.instance()

        assert runtime.initialized is True

    def test_probes_once(self, make_bridge) -> None:
        """Test later accesses never probe the environment again."""
        runtime = LauncherRuntime(namespace={"Main": make_bridge()})

        with patch(
            "launchbridge.core.runtime.detect_backend_type",
            return_value=BackendType.CONSOLE_WEBVIEW,
        ) as detect:
            for _ in range(3):
                runtime.instance()

        assert detect.call_count == 1

    def test_decision_is_fixed_after_first_access(self, make_bridge) -> None:
        namespace: dict = {}
        runtime = LauncherRuntime(namespace=namespace)
        assert runtime.instance().is_switch()

        namespace["Main"] = make_bridge()

        assert runtime.instance().is_switch()


class TestDetection:
    """Test transport selection by environment."""

    def test_bridge_present_selects_host(self, make_bridge) -> None:
        backend = LauncherRuntime(namespace={"Main": make_bridge()}).instance()

        assert backend.is_node()
        assert isinstance(backend.messenger.transport, HostProcessTransport)

    def test_bridge_absent_selects_console(self, make_transport) -> None:
        console = make_transport()
        runtime = LauncherRuntime(namespace={}, console_transport=console)

        backend = runtime.instance()

        assert backend.is_switch()
        assert backend.messenger.transport is console

    def test_console_transport_from_environment(self, make_transport) -> None:
        """Test a transport published by the console takes precedence."""
        published = make_transport()
        injected = make_transport()
        runtime = LauncherRuntime(
            namespace={"nx": published}, console_transport=injected
        )

        assert runtime.instance().messenger.transport is published

    def test_configured_bridge_name(self, make_bridge) -> None:
        config = LauncherConfig(bridge=BridgeConfig(host_bridge_name="Electron"))
        runtime = LauncherRuntime(config, namespace={"Electron": make_bridge()})

        assert runtime.instance().is_node()

    def test_global_namespace_used_by_default(self, make_bridge) -> None:
        with patch(
            "launchbridge.core.runtime.global_namespace",
            return_value={"Main": make_bridge()},
        ):
            assert LauncherRuntime().instance().is_node()

    @pytest.mark.asyncio
    async def test_no_console_transport_rejects_calls(self) -> None:
        backend = LauncherRuntime(namespace={}).instance()

        assert isinstance(backend.messenger.transport, UnavailableTransport)
        with pytest.raises(TransportUnavailableError) as exc_info:
            await backend.get_version()
        assert exc_info.value.call_name == "get_version"


class TestFromConfig:
    """Test LauncherRuntime.from_config."""

    def test_loads_file(self, tmp_path, monkeypatch) -> None:
        monkeypatch.delenv("LAUNCHBRIDGE_HOST_BRIDGE", raising=False)
        config_file = tmp_path / "launchbridge.yaml"
        config_file.write_text(
            "logging:\n  level: DEBUG\n  format: text\n"
            "bridge:\n  host_bridge_name: Shell\n"
        )

        runtime = LauncherRuntime.from_config(config_file, namespace={})

        assert runtime.config.logging.level == "DEBUG"
        assert runtime.config.bridge.host_bridge_name == "Shell"
        assert runtime.initialized is False

    @pytest.mark.parametrize(
        ("debug", "expected_level"), [("true", "DEBUG"), ("false", "WARNING")]
    )
    def test_debug_forces_debug_logging(
        self, tmp_path, monkeypatch, debug: str, expected_level: str
    ) -> None:
        """Test debug mode overrides the configured log level."""
        monkeypatch.delenv("LAUNCHBRIDGE_DEBUG", raising=False)
        monkeypatch.delenv("LAUNCHBRIDGE_LOG_LEVEL", raising=False)
        config_file = tmp_path / "launchbridge.yaml"
        config_file.write_text(
            f"debug: {debug}\nlogging:\n  level: WARNING\n  format: json\n"
        )

        with patch("launchbridge.core.runtime.setup_logging") as setup:
            runtime = LauncherRuntime.from_config(config_file, namespace={})

        setup.assert_called_once_with(expected_level, "json")
        assert runtime.config.debug is (debug == "true")
