import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import PlainTextResponse

from .config_store import ConfigStore, config_store
from .exceptions import ValidationError
from .models import AppEntry, RemoveGameRequest
from .uploads import ImageStore, image_store

logger = logging.getLogger(__name__)

games_router = APIRouter()


def get_config_store() -> ConfigStore:
    return config_store


def get_image_store() -> ImageStore:
    return image_store


def _add_game(
    store: ConfigStore,
    images: ImageStore,
    name: str,
    command: str,
    image: Optional[UploadFile],
) -> None:
    with store.edit() as doc:
        store.check_available(doc, name, command)

        image_path = ""
        # Browsers submit an empty file part when no image was chosen.
        if image is not None and image.filename:
            image_path = images.save(image)

        store.add_entry(doc, AppEntry.create(name, command, image_path))
    logger.info(f'Added "{name}" ({command}) to Sunshine config')


@games_router.get("/games")
def list_games(store: ConfigStore = Depends(get_config_store)) -> List[dict]:
    """List every entry in Sunshine's apps.json."""
    doc = store.load()
    return [app.to_json_dict() for app in store.list_entries(doc)]


@games_router.post("/add-steam-game", response_class=PlainTextResponse)
def add_steam_game(
    steam_command: Optional[str] = Form(None, alias="steamCommand"),
    steam_app_name: Optional[str] = Form(None, alias="steamAppName"),
    steam_image: Optional[UploadFile] = File(None, alias="steamImage"),
    store: ConfigStore = Depends(get_config_store),
    images: ImageStore = Depends(get_image_store),
):
    if not steam_command or not steam_app_name:
        logger.warning("Rejected Steam game without command or name")
        raise ValidationError("Missing steamCommand or steamAppName")

    _add_game(store, images, steam_app_name, steam_command, steam_image)
    return f'Steam game "{steam_app_name}" added successfully!'


@games_router.post("/add-exe-game", response_class=PlainTextResponse)
def add_exe_game(
    exe_path: Optional[str] = Form(None, alias="exePath"),
    exe_name: Optional[str] = Form(None, alias="exeName"),
    exe_image: Optional[UploadFile] = File(None, alias="exeImage"),
    store: ConfigStore = Depends(get_config_store),
    images: ImageStore = Depends(get_image_store),
):
    if not exe_path or not exe_name:
        logger.warning("Rejected executable game without path or name")
        raise ValidationError("Missing exePath or exeName")

    _add_game(store, images, exe_name, exe_path, exe_image)
    return f'Executable game "{exe_name}" added successfully!'


@games_router.post("/remove-game", response_class=PlainTextResponse)
def remove_game(
    request: Optional[RemoveGameRequest] = None,
    store: ConfigStore = Depends(get_config_store),
):
    game_name = request.game_name if request else None
    if not game_name:
        raise ValidationError("Missing gameName")

    with store.edit() as doc:
        store.remove_entry(doc, game_name)
    logger.info(f'Removed "{game_name}" from Sunshine config')
    return f'Game "{game_name}" removed from Sunshine!'
