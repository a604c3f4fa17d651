from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from sunshine_manager.config_store import ConfigStore
from sunshine_manager.games import get_config_store, get_image_store
from sunshine_manager.launcher import get_launcher_service
from sunshine_manager.main import create_app
from sunshine_manager.services import LauncherService
from sunshine_manager.uploads import ImageStore


@pytest.fixture
def apps_json(tmp_path: Path) -> Path:
    return tmp_path / "apps.json"


@pytest.fixture
def store(apps_json: Path) -> ConfigStore:
    return ConfigStore(apps_json)


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    return tmp_path / "images"


@pytest.fixture
def launcher() -> LauncherService:
    return LauncherService(
        steam_cmd="exit 0",
        moonlight_cmd="exit 0",
        sunshine_stop_cmd="exit 0",
        sunshine_start_cmd="exit 0",
        restart_delay=0,
    )


@pytest.fixture
def client(tmp_path: Path, store: ConfigStore, image_dir: Path, launcher: LauncherService):
    app = create_app(static_dir=str(tmp_path / "public"))
    app.dependency_overrides[get_config_store] = lambda: store
    app.dependency_overrides[get_image_store] = lambda: ImageStore(image_dir)
    app.dependency_overrides[get_launcher_service] = lambda: launcher
    with TestClient(app) as test_client:
        yield test_client
