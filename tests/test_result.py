import pytest

from simpleblog.application.result import ErrorKind, Result, capture
from simpleblog.domain.exceptions import (
    PostNotFoundError,
    UpstreamUnavailableError,
    ValidationError,
)
from conftest import run


async def _raise(exc):
    raise exc


async def _value(value):
    return value


class TestCapture:

    def test_success(self):
        result = run(capture(_value(42)))

        assert result.ok
        assert result.value == 42

    def test_not_found(self):
        result = run(capture(_raise(PostNotFoundError("x"))))

        assert result.error == ErrorKind.NOT_FOUND
        assert result.message == "Post not found"

    def test_validation_keeps_message_and_field(self):
        result = run(capture(_raise(ValidationError("Title is required", field="title"))))

        assert result.error == ErrorKind.VALIDATION
        assert result.message == "Title is required"
        assert result.field == "title"

    def test_upstream_uses_view_message(self):
        default = run(capture(_raise(UpstreamUnavailableError("down"))))
        custom = run(
            capture(
                _raise(UpstreamUnavailableError("down")),
                messages={ErrorKind.UPSTREAM: "Failed to save post"},
            )
        )

        assert default.message == "Unable to load posts. Please try again later."
        assert custom.message == "Failed to save post"

    def test_unexpected_errors_propagate(self):
        with pytest.raises(RuntimeError):
            run(capture(_raise(RuntimeError("boom"))))


def test_failure_constructor():
    result = Result.failure(ErrorKind.UPSTREAM, "down")
    assert not result.ok
    assert result.value is None
