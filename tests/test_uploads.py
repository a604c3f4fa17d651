import io
from pathlib import Path

import pytest
from fastapi import UploadFile

from sunshine_manager.exceptions import StoreIOError, ValidationError
from sunshine_manager.uploads import ImageStore


def _upload(filename: str, content: bytes = b"\x89PNG") -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=filename)


def test_save_creates_directory_and_returns_path(image_dir: Path) -> None:
    path = ImageStore(image_dir).save(_upload("portal2.png"))

    assert path == str(image_dir / "portal2.png")
    assert (image_dir / "portal2.png").read_bytes() == b"\x89PNG"


@pytest.mark.parametrize(
    "filename",
    ["C:\\Users\\me\\Pictures\\art.png", "../../art.png", "nested/dir/art.png"],
)
def test_save_keeps_only_base_filename(image_dir: Path, filename: str) -> None:
    path = ImageStore(image_dir).save(_upload(filename))
    assert path == str(image_dir / "art.png")


@pytest.mark.parametrize("filename", ["", ".", ".."])
def test_save_without_filename_is_rejected(image_dir: Path, filename: str) -> None:
    with pytest.raises(ValidationError):
        ImageStore(image_dir).save(_upload(filename))


def test_save_into_unwritable_location_raises_io_error(tmp_path: Path) -> None:
    blocker = tmp_path / "images"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(StoreIOError):
        ImageStore(blocker).save(_upload("art.png"))
