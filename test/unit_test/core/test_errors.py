"""Unit tests for the TotalFit error hierarchy."""

import pytest

from totalfit.core.errors import ConfigurationError, NotFoundError, TotalFitError, ValidationFailedError


@pytest.mark.parametrize(
    "error_type,status_code",
    [(TotalFitError, 500), (NotFoundError, 404), (ValidationFailedError, 400), (ConfigurationError, 500)],
)
def test_default_status_codes(error_type, status_code):
    error = error_type("something went wrong")
    assert error.status_code == status_code
    assert error.message == "something went wrong"
    assert str(error) == "something went wrong"
    assert error.details is None


def test_status_code_override_is_per_instance():
    error = NotFoundError("gone", status_code=410, details={"id": "a1"})
    assert error.status_code == 410
    assert error.details == {"id": "a1"}
    assert NotFoundError("still missing").status_code == 404


def test_subclasses_are_totalfit_errors():
    with pytest.raises(TotalFitError):
        raise ValidationFailedError("name is required")
