# tests/conftest.py
from pyparsel.Result import Failure, ParseResult, Success


def assert_result_eq(res1: ParseResult, res2: ParseResult):
    """
    Deep comparison of two ParseResults.
    """
    if isinstance(res1, Success):
        assert isinstance(res2, Success), "Result mismatch: Success vs Failure"
        assert res1.value == res2.value
        assert res1.rest == res2.rest
    else:
        assert isinstance(res2, Failure), "Result mismatch: Failure vs Success"
        assert str(res1.error) == str(res2.error)
        assert res1.error.remaining == res2.error.remaining
