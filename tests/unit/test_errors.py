from __future__ import annotations

from testtools.matchers import Equals, MismatchError

from lib_assertions.domain.errors import AssertionFailure, MatchFailure, NothingRaised, WrongExceptionType


def test_error_hierarchy() -> None:
    assert issubclass(AssertionFailure, AssertionError)
    for failure_type in (MatchFailure, NothingRaised, WrongExceptionType):
        assert issubclass(failure_type, AssertionFailure)
    for exception in (NothingRaised(""), WrongExceptionType("")):
        assert isinstance(exception, AssertionError)


def test_match_failure_is_a_testtools_mismatch_error() -> None:
    matcher = Equals(1)
    mismatch = matcher.match(2)
    failure = MatchFailure(2, matcher, mismatch)

    assert isinstance(failure, MismatchError)
    assert failure.matchee == 2
    assert failure.matcher is matcher
    assert str(failure) == mismatch.describe()


def test_match_failure_verbose_rendering_names_matchee_and_matcher() -> None:
    matcher = Equals(1)
    failure = MatchFailure(2, matcher, matcher.match(2), True)

    rendered = str(failure)
    assert "Match failed" in rendered
    assert "Matchee: 2" in rendered
    assert str(matcher) in rendered
