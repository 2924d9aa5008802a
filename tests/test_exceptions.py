"""Tests for public exceptions."""

import pytest

from httpreq.exceptions import (
    DecodeFailedError,
    DispatchFailedError,
    EmptyMethodError,
    HttpReqAPIError,
    HttpReqConfigError,
    HttpReqError,
    HttpReqValidationError,
    InvalidResponseTargetError,
    NilResponseTargetError,
    NoPathParamValueError,
    PathParamConflictError,
    PathParamCountMismatchError,
    ProxyParseError,
    QueryUnescapeError,
    RequestConstructionError,
    ResponseReadError,
    SerializationFailedError,
    UnknownMethodError,
)


class TestHttpReqError:
    """Tests for base HttpReqError."""

    def test_is_exception(self):
        """HttpReqError should be an Exception."""
        assert issubclass(HttpReqError, Exception)

    def test_can_be_raised(self):
        """HttpReqError should be raisable with message."""
        with pytest.raises(HttpReqError) as exc_info:
            raise HttpReqError("test error")
        assert str(exc_info.value) == "test error"


class TestHttpReqAPIError:
    """Tests for HttpReqAPIError."""

    def test_inherits_from_base(self):
        """HttpReqAPIError should inherit from HttpReqError."""
        assert issubclass(HttpReqAPIError, HttpReqError)

    def test_with_message_only(self):
        """Should create error with message only."""
        error = HttpReqAPIError("request failed")
        assert str(error) == "request failed"
        assert error.status_code is None

    def test_with_status_code(self):
        """Should store status code."""
        error = DecodeFailedError("bad body", status_code=502)
        assert str(error) == "bad body"
        assert error.status_code == 502


class TestTaxonomy:
    """Tests for the grouping of concrete errors."""

    @pytest.mark.parametrize(
        "error",
        [
            EmptyMethodError,
            UnknownMethodError,
            NoPathParamValueError,
            PathParamCountMismatchError,
            PathParamConflictError,
            NilResponseTargetError,
            InvalidResponseTargetError,
        ],
    )
    def test_validation_errors(self, error):
        """Pre-flight errors should be validation errors."""
        assert issubclass(error, HttpReqValidationError)

    @pytest.mark.parametrize(
        "error",
        [
            SerializationFailedError,
            RequestConstructionError,
            ProxyParseError,
            QueryUnescapeError,
        ],
    )
    def test_config_errors(self, error):
        """Request construction errors should be config errors."""
        assert issubclass(error, HttpReqConfigError)

    @pytest.mark.parametrize(
        "error",
        [DispatchFailedError, ResponseReadError, DecodeFailedError],
    )
    def test_api_errors(self, error):
        """Dispatch errors should be API errors."""
        assert issubclass(error, HttpReqAPIError)

    def test_can_be_caught_as_base(self):
        """Should be catchable as HttpReqError."""
        with pytest.raises(HttpReqError):
            raise DispatchFailedError("connection refused")
