import asyncio

import pytest

from sunshine_manager.exceptions import LaunchError
from sunshine_manager.services import LauncherService


def test_launch_steam_runs_command(tmp_path) -> None:
    marker = tmp_path / "steam-started"
    service = LauncherService(steam_cmd=f'echo ok > "{marker}"')

    asyncio.run(service.launch_steam())

    assert marker.exists()


def test_failed_command_raises_launch_error() -> None:
    service = LauncherService(moonlight_cmd="echo boom 1>&2; exit 3")

    with pytest.raises(LaunchError, match="Error launching Moonlight: command exited with status 3: boom"):
        asyncio.run(service.launch_moonlight())


def test_restart_runs_stop_then_start(tmp_path) -> None:
    log = tmp_path / "restart.log"
    service = LauncherService(
        sunshine_stop_cmd=f'echo stop >> "{log}"',
        sunshine_start_cmd=f'echo start >> "{log}"',
        restart_delay=0,
    )

    asyncio.run(service.restart_sunshine())

    assert log.read_text().split() == ["stop", "start"]


def test_restart_does_not_start_when_stop_fails(tmp_path) -> None:
    marker = tmp_path / "started"
    service = LauncherService(
        sunshine_stop_cmd="exit 128",
        sunshine_start_cmd=f'echo start > "{marker}"',
        restart_delay=0,
    )

    with pytest.raises(LaunchError, match="Error stopping Sunshine"):
        asyncio.run(service.restart_sunshine())

    assert not marker.exists()
