"""Tests for tusk.core.result module."""

import pytest

from tusk.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    """Tests for Ok type."""

    def test_ok_accessors(self) -> None:
        result = Ok("1a2b3c")
        assert result.value == "1a2b3c"
        assert result.is_ok() is True
        assert result.is_err() is False
        assert result.unwrap() == "1a2b3c"
        assert result.unwrap_or("HEAD") == "1a2b3c"

    def test_ok_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap_err on Ok"):
            Ok(42).unwrap_err()

    def test_ok_map(self) -> None:
        assert Ok(" main\n").map(str.strip) == Ok("main")

    def test_ok_map_err_is_noop(self) -> None:
        assert Ok(42).map_err(lambda e: f"error: {e}") == Ok(42)

    def test_ok_flat_map(self) -> None:
        result: Result[str, str] = Ok("12")
        assert result.flat_map(lambda s: Ok(int(s))) == Ok(12)
        assert result.flat_map(lambda s: Err("nope")) == Err("nope")

    def test_ok_repr(self) -> None:
        assert repr(Ok(42)) == "Ok(42)"

    def test_ok_frozen(self) -> None:
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]

    def test_ok_equality(self) -> None:
        assert Ok(42) == Ok(42)
        assert Ok(42) != Ok(0)
        assert Ok(42) != Err(42)


class TestErr:
    """Tests for Err type."""

    def test_err_accessors(self) -> None:
        result: Result[int, str] = Err("fatal: bad revision")
        assert result.is_ok() is False
        assert result.is_err() is True
        assert result.unwrap_or(7) == 7
        assert result.unwrap_err() == "fatal: bad revision"

    def test_err_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("oops").unwrap()

    def test_err_map_is_noop(self) -> None:
        result: Result[int, str] = Err("error")
        assert result.map(lambda x: x * 2) == Err("error")

    def test_err_map_err(self) -> None:
        assert Err("oops").map_err(lambda e: f"error: {e}") == Err("error: oops")

    def test_err_flat_map_is_noop(self) -> None:
        result: Result[int, str] = Err("error")
        assert result.flat_map(lambda x: Ok(x * 2)) == Err("error")

    def test_err_repr(self) -> None:
        assert repr(Err("oops")) == "Err('oops')"

    def test_err_frozen(self) -> None:
        result = Err("error")
        with pytest.raises(AttributeError):
            result.error = "other"  # type: ignore[misc]


class TestTypeGuards:
    def test_is_ok(self) -> None:
        assert is_ok(Ok(1)) is True
        assert is_ok(Err("e")) is False

    def test_is_err(self) -> None:
        assert is_err(Err("e")) is True
        assert is_err(Ok(1)) is False


class TestPatternMatching:
    def test_match_ok(self) -> None:
        result: Result[int, str] = Ok(42)
        match result:
            case Ok(value):
                assert value == 42
            case Err(_):
                pytest.fail("Should not match Err")

    def test_match_err(self) -> None:
        result: Result[int, str] = Err("oops")
        match result:
            case Ok(_):
                pytest.fail("Should not match Ok")
            case Err(error):
                assert error == "oops"

    def test_chain(self) -> None:
        result: Result[str, str] = Ok("3\n")
        final = result.map(str.strip).map(int).flat_map(lambda n: Ok(n * 2) if n else Err("zero"))
        assert final == Ok(6)
