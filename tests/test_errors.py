from covid_api.errors import invalid_parameter, upstream_error
from covid_api.results import Failure, Success, failure_from_exception


def test_upstream_error_payload() -> None:
    error = upstream_error(Failure(error="Server error '500 Internal Server Error'"))

    assert error.status_code == 502
    assert error.detail == {
        "code": "UpstreamError",
        "description": "Server error '500 Internal Server Error'",
    }


def test_invalid_parameter_error_payload() -> None:
    error = invalid_parameter("n must be a non-negative integer")

    assert error.status_code == 400
    assert error.detail == {
        "code": "InvalidParameterValue",
        "description": "n must be a non-negative integer",
    }


def test_failure_from_exception_uses_message() -> None:
    assert failure_from_exception(RuntimeError("boom")) == Failure(error="boom")


def test_failure_from_exception_without_message_uses_type_name() -> None:
    assert failure_from_exception(TimeoutError()) == Failure(error="TimeoutError")


def test_variants_are_distinct() -> None:
    assert not isinstance(Success(value={"error": "looks like a failure"}), Failure)
