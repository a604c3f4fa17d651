import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from .services import LauncherService, launcher_service

logger = logging.getLogger(__name__)

launcher_router = APIRouter()


def get_launcher_service() -> LauncherService:
    return launcher_service


@launcher_router.post("/launch-steam", response_class=PlainTextResponse)
async def launch_steam(launcher: LauncherService = Depends(get_launcher_service)):
    await launcher.launch_steam()
    return "Steam launched successfully!"


@launcher_router.post("/launch-moonlight", response_class=PlainTextResponse)
async def launch_moonlight(launcher: LauncherService = Depends(get_launcher_service)):
    await launcher.launch_moonlight()
    return "Moonlight launched successfully!"


@launcher_router.post("/restart-sunshine", response_class=PlainTextResponse)
async def restart_sunshine(launcher: LauncherService = Depends(get_launcher_service)):
    """Kill Sunshine, wait for it to release its ports and start it again."""
    await launcher.restart_sunshine()
    logger.info("Sunshine restarted")
    return "Sunshine restarted successfully!"
