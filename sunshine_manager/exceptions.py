"""Error kinds surfaced to HTTP clients as plain-text responses."""

from fastapi import status


class ManagerError(Exception):
    """Base error; ``status_code`` is the HTTP status it maps to."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ConfigStoreError(ManagerError):
    """Raised by the config store and the image store."""


class ParseError(ConfigStoreError):
    """The persisted config is not valid JSON or not a config document."""


class StoreIOError(ConfigStoreError):
    """Reading or writing a file on disk failed."""


class DuplicateError(ConfigStoreError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ConfigStoreError):
    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(ManagerError):
    """A request is missing a required field or names an unusable file."""

    status_code = status.HTTP_400_BAD_REQUEST


class LaunchError(ManagerError):
    """A shell command for an external application failed."""
