import asyncio
import logging

from .config import (
    MOONLIGHT_EXE,
    STEAM_LAUNCH_CMD,
    SUNSHINE_EXE,
    SUNSHINE_RESTART_DELAY,
    SUNSHINE_STOP_CMD,
)
from .exceptions import LaunchError

logger = logging.getLogger(__name__)


class LauncherService:
    def __init__(
        self,
        steam_cmd: str = STEAM_LAUNCH_CMD,
        moonlight_cmd: str = f'start "" {MOONLIGHT_EXE}',
        sunshine_stop_cmd: str = SUNSHINE_STOP_CMD,
        sunshine_start_cmd: str = f'start "" {SUNSHINE_EXE}',
        restart_delay: float = SUNSHINE_RESTART_DELAY,
    ):
        self.steam_cmd = steam_cmd
        self.moonlight_cmd = moonlight_cmd
        self.sunshine_stop_cmd = sunshine_stop_cmd
        self.sunshine_start_cmd = sunshine_start_cmd
        self.restart_delay = restart_delay

    async def _run(self, command: str, action: str) -> None:
        logger.info(f"Running command for {action}: {command}")
        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            _, stderr = await process.communicate()
        except OSError as e:
            logger.error(f"Failed {action}: {e}")
            raise LaunchError(f"Error {action}: {e}") from e

        if process.returncode != 0:
            detail = stderr.decode(errors="replace").strip()
            message = f"command exited with status {process.returncode}"
            if detail:
                message = f"{message}: {detail}"
            logger.error(f"Failed {action}: {message}")
            raise LaunchError(f"Error {action}: {message}")

    async def launch_steam(self) -> None:
        await self._run(self.steam_cmd, "launching Steam")

    async def launch_moonlight(self) -> None:
        await self._run(self.moonlight_cmd, "launching Moonlight")

    async def restart_sunshine(self) -> None:
        await self._run(self.sunshine_stop_cmd, "stopping Sunshine")
        # Sunshine needs time to release its ports before it can start again.
        await asyncio.sleep(self.restart_delay)
        await self._run(self.sunshine_start_cmd, "starting Sunshine")


# Global service instance
launcher_service = LauncherService()
