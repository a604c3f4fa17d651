import pytest

from sunshine_manager.exceptions import (
    ConfigStoreError,
    DuplicateError,
    LaunchError,
    ManagerError,
    NotFoundError,
    ParseError,
    StoreIOError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error_type, status_code",
    [
        (ParseError, 500),
        (StoreIOError, 500),
        (DuplicateError, 400),
        (NotFoundError, 404),
        (ValidationError, 400),
        (LaunchError, 500),
    ],
)
def test_status_codes(error_type, status_code) -> None:
    assert issubclass(error_type, ManagerError)
    assert error_type.status_code == status_code


def test_request_errors_are_not_store_errors() -> None:
    assert not issubclass(ValidationError, ConfigStoreError)
    assert not issubclass(LaunchError, ConfigStoreError)
