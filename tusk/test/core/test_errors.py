"""Tests for tusk.core.errors module."""

import pytest

from tusk.core.errors import ErrorCode


class TestErrorCodeValues:
    """Exit codes are part of the CLI contract."""

    @pytest.mark.parametrize(
        ("code", "value"),
        [
            (ErrorCode.OK, 0),
            (ErrorCode.USER_ERROR, 1),
            (ErrorCode.ENV_ERROR, 2),
            (ErrorCode.GIT_ERROR, 3),
            (ErrorCode.IO_ERROR, 5),
        ],
    )
    def test_value(self, code: ErrorCode, value: int) -> None:
        assert code == value
        assert int(code) == value


class TestErrorCodeUsage:
    def test_is_success(self) -> None:
        assert ErrorCode.OK.is_success is True
        assert ErrorCode.GIT_ERROR.is_success is False

    def test_is_error(self) -> None:
        assert ErrorCode.OK.is_error is False
        assert all(code.is_error for code in ErrorCode if code != ErrorCode.OK)

    def test_str(self) -> None:
        assert str(ErrorCode.GIT_ERROR) == "git error"
        assert str(ErrorCode.ENV_ERROR) == "env error"
