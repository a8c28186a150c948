"""Tests for error types and codes."""

import pytest

from apidrift.core.errors import (
    AcquisitionError,
    ApiDriftError,
    ConfigError,
    DecodeError,
    ErrorCode,
    IndexerError,
    RefNotFoundError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.INDEX_NOT_FOUND, 3000),
            (ErrorCode.INDEX_MALFORMED, 3000),
            (ErrorCode.INDEX_EMPTY, 3000),
            (ErrorCode.INDEXER_UNAVAILABLE, 4000),
            (ErrorCode.INDEXER_FAILED, 4000),
            (ErrorCode.ACQUISITION_CLONE_FAILED, 5000),
            (ErrorCode.ACQUISITION_REF_NOT_FOUND, 5000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        # Given
        error_code = code

        # When
        value = error_code.value

        # Then
        assert expected_range <= value < expected_range + 1000


class TestApiDriftError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = ApiDriftError(
            code=ErrorCode.INDEX_MALFORMED,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 3003,
            "error": "INDEX_MALFORMED",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_includes_code_and_name(self) -> None:
        """String form carries code, name and message."""
        # Given
        error = DecodeError.empty("consumer")

        # When
        text = str(error)

        # Then
        assert text == "[3004] INDEX_EMPTY: Index artifact is empty (consumer)"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        """Errors are regular exceptions."""
        with pytest.raises(ApiDriftError):
            raise IndexerError.unavailable("scip-go")


class TestFactories:
    """Factory method tests."""

    def test_config_parse_error(self) -> None:
        error = ConfigError.parse_error("/x/.apidrift.yaml", "bad indent")

        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert error.details == {"path": "/x/.apidrift.yaml", "reason": "bad indent"}

    def test_config_invalid_value(self) -> None:
        error = ConfigError.invalid_value("indexer.timeout_sec", 0, "Must be >= 1")

        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert error.details["value"] == "0"

    def test_decode_malformed_without_source(self) -> None:
        error = DecodeError.malformed("truncated")

        assert error.message == "Malformed index: truncated"
        assert not error.retryable

    def test_decode_not_found(self) -> None:
        assert DecodeError.not_found("/tmp/x.scip").code == ErrorCode.INDEX_NOT_FOUND

    def test_indexer_failed_is_retryable(self) -> None:
        error = IndexerError.failed("github.com/acme/kit@v1.0.0", "exit code 1")

        assert error.retryable
        assert "github.com/acme/kit@v1.0.0" in error.message

    def test_ref_not_found_is_acquisition_error(self) -> None:
        error = RefNotFoundError.for_version("https://github.com/acme/kit.git", "v9")

        assert isinstance(error, AcquisitionError)
        assert error.code == ErrorCode.ACQUISITION_REF_NOT_FOUND
