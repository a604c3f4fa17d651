"""
Load, mutate and persist Sunshine's apps.json.

The whole file is read into memory, changed and written back on every
mutation. ``edit()`` holds a process-wide lock across that sequence so two
requests in this server cannot lose each other's update. Writes made by
Sunshine itself, or by any other process, are not coordinated. ``load()``
takes no lock; ``save()`` replaces the file atomically so a concurrent read
never sees a partially written document.
"""

import json
import logging
import os
import shutil
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Union

from pydantic import ValidationError as PydanticValidationError

from .config import SUNSHINE_APPS_JSON
from .exceptions import DuplicateError, NotFoundError, ParseError, StoreIOError
from .models import AppEntry, ConfigDocument

logger = logging.getLogger(__name__)


class ConfigStore:
    def __init__(self, path: Union[str, Path] = SUNSHINE_APPS_JSON):
        self.path = Path(path)
        self._lock = threading.Lock()

    def load(self) -> ConfigDocument:
        if not self.path.exists():
            logger.debug(f"No config at {self.path}, starting empty")
            return ConfigDocument()

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to read {self.path}: {e}")
            raise StoreIOError(f"Error reading config: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(f"Error reading config: invalid JSON in {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ParseError(f"Error reading config: {self.path} is not a JSON object")
        if data.get("apps") is None:
            data["apps"] = []

        try:
            return ConfigDocument.model_validate(data)
        except PydanticValidationError as e:
            raise ParseError(f"Error reading config: unexpected layout in {self.path}: {e}") from e

    def save(self, doc: ConfigDocument) -> None:
        """Write the document to a temporary file and swap it into place.

        Readers see either the old or the new file, never a partial one.
        """
        content = json.dumps(doc.to_json_dict(), indent=2)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error(f"Failed to write {self.path}: {e}")
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreIOError(f"Error writing config: {e}") from e

    @contextmanager
    def edit(self) -> Iterator[ConfigDocument]:
        """Load the document, hand it to the caller and save it afterwards.

        Nothing is written if the body of the ``with`` block raises.
        """
        with self._lock:
            doc = self.load()
            yield doc
            self.save(doc)

    def check_available(self, doc: ConfigDocument, name: str, command: str) -> None:
        if any(app.name == name for app in doc.apps):
            raise DuplicateError(f'An entry named "{name}" is already in Sunshine config')
        if any(app.command == command for app in doc.apps):
            raise DuplicateError(
                f'An entry with command "{command}" is already in Sunshine config'
            )

    def add_entry(self, doc: ConfigDocument, candidate: AppEntry) -> ConfigDocument:
        self.check_available(doc, candidate.name, candidate.command)
        doc.apps.append(candidate)
        return doc

    def remove_entry(self, doc: ConfigDocument, name: str) -> ConfigDocument:
        remaining = [app for app in doc.apps if app.name != name]
        if len(remaining) == len(doc.apps):
            raise NotFoundError(f'No game named "{name}" found in Sunshine config')
        doc.apps = remaining
        return doc

    def list_entries(self, doc: ConfigDocument) -> List[AppEntry]:
        return doc.apps


# Global store instance
config_store = ConfigStore()
