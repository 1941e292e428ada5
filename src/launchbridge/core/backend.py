"""Domain operations of the launcher backend.

The backend is either the desktop host (Ryujinx) or the console webview
(Switch). It never detects which by itself; the runtime decides once and
hands it the matching transport.
"""

from launchbridge.core.messenger import Messenger
from launchbridge.schemas.types import BackendType, ProgressCallback
from launchbridge.transports.base import Transport
from launchbridge.utils.telemetry import get_logger

RELAUNCH_NOOP_RESPONSE = "relaunch is NOP on PC"


class Backend:
    """Semantically named launcher operations over a messenger.

    Only the platform name is cached; every other query is sent each time
    since installation state and versions can change during a session.
    """

    def __init__(
        self,
        backend_type: BackendType,
        transport: Transport,
        true_sentinel: str = "true",
        false_sentinel: str = "false",
    ) -> None:
        """Initialize the backend.

        Args:
            backend_type: Environment the transport talks to
            transport: Transport performing the calls
            true_sentinel: Response text meaning True for boolean requests
            false_sentinel: Response text meaning False for boolean requests
        """
        self._backend_type = backend_type
        self._messenger = Messenger(transport, true_sentinel, false_sentinel)
        self._platform: str | None = None
        self._logger = get_logger(
            "launchbridge.backend", backend_type=backend_type.value
        )

    @property
    def backend_type(self) -> BackendType:
        return self._backend_type

    @property
    def messenger(self) -> Messenger:
        return self._messenger

    def is_node(self) -> bool:
        """Whether this is the desktop host, without making a backend call."""
        return self._backend_type is BackendType.HOST_PROCESS

    def is_switch(self) -> bool:
        """Whether this is the console webview, without making a backend call."""
        return self._backend_type is BackendType.CONSOLE_WEBVIEW

    def platform_name(self) -> str:
        """User-facing platform name, without making a backend call."""
        return "Ryujinx" if self.is_node() else "Switch"

    async def get_platform(self) -> str:
        """Platform reported by the backend itself, requested once."""
        if self._platform is None:
            self._platform = await self._messenger.custom_request("get_platform")
        return self._platform

    async def get_sd_root(self) -> str:
        return await self._messenger.custom_request("get_sdcard_root")

    async def is_installed(self) -> bool:
        """Whether the mod pack is installed."""
        return await self._messenger.boolean_request("is_installed")

    async def get_version(self) -> str:
        """Installed mod pack version."""
        return await self._messenger.custom_request("get_version")

    async def play(self) -> str:
        return await self._messenger.exit_session()

    async def quit(self) -> str:
        return await self._messenger.exit_application()

    async def ping(self, message: str = "ping") -> str:
        return await self._messenger.ping(message)

    async def open_mod_manager(self) -> str:
        return await self._messenger.custom_request("open_mod_manager")

    async def is_mod_enabled(self, mod_path: str) -> bool:
        """Whether the mod at ``mod_path`` (relative to sd:/) is enabled."""
        return await self._messenger.boolean_request("is_mod_enabled", [mod_path])

    async def get_arcrop_api_version(self) -> str:
        return await self._messenger.custom_request("get_arcrop_api_version")

    async def get_launcher_version(self) -> str:
        return await self._messenger.custom_request("get_launcher_version")

    async def relaunch_application(self) -> str:
        """Relaunch the application. Does nothing on the desktop host."""
        if self.is_node():
            self._logger.debug("Skipping relaunch on host process")
            return RELAUNCH_NOOP_RESPONSE
        return await self._messenger.custom_request("relaunch_application")

    async def clone_mod(
        self, src: str, dest: str, on_progress: ProgressCallback | None = None
    ) -> str:
        """Copy the mod at ``src`` into ``dest``.

        Args:
            src: Source mod directory
            dest: Destination directory
            on_progress: Receives copy progress until the call completes
        """
        return await self._messenger.custom_request(
            "clone_mod", [src, dest], on_progress
        )

    async def remove_dir_all(self, path: str) -> str:
        """Remove ``path`` and everything under it.

        The path is sent as given; callers validate it.
        """
        return await self._messenger.custom_request("remove_dir_all", [path])
