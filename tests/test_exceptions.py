import pytest

from shop_manager.core import exceptions
from shop_manager.core.exceptions import (
    AppError,
    EmptyQueryError,
    EntityNotFoundException,
    NoFieldsToUpdateError,
)


@pytest.mark.parametrize(
    "error_cls, status_code, message",
    [
        (EntityNotFoundException, 404, "Entity not found"),
        (EmptyQueryError, 400, "Empty query"),
        (NoFieldsToUpdateError, 400, "No fields to update"),
    ],
)
def test_error_defaults(error_cls, status_code, message):
    error = error_cls()
    assert isinstance(error, AppError)
    assert error.status_code == status_code
    assert error.message == message
    assert error.details == {}


def test_error_taxonomy():
    """The taxonomy holds only the errors the services raise."""
    declared = {
        name for name, obj in vars(exceptions).items()
        if isinstance(obj, type) and issubclass(obj, AppError) and obj is not AppError
    }
    assert declared == {"EntityNotFoundException", "EmptyQueryError", "NoFieldsToUpdateError"}
