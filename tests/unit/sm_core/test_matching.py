import pytest

from sm_core.matching import compute_visibility, default_option_filter, first_match
from sm_core.models import OptionRecord
from sm_core.registry import flatten

pytestmark = pytest.mark.unit_core


def _record(content) -> OptionRecord:
    return OptionRecord(index=0, content=content)


def test_default_filter_is_case_insensitive() -> None:
    assert default_option_filter("HELLO", _record("say hello now")) is True
    assert default_option_filter("hello", _record("SAY HELLO NOW")) is True


def test_default_filter_empty_search_matches_text_only() -> None:
    assert default_option_filter("", _record("anything")) is True
    assert default_option_filter("", _record("")) is True
    assert default_option_filter("", _record(object())) is False


def test_default_filter_rejects_non_text_content() -> None:
    assert default_option_filter("x", _record(["x"])) is False
    assert default_option_filter("1", _record(1)) is False


def test_default_filter_treats_search_literally() -> None:
    assert default_option_filter(".*", _record("a.*b")) is True
    assert default_option_filter(".*", _record("ab")) is False


def test_visibility_for_first_match_example() -> None:
    records = flatten(["Apple", "Banana", "Cherry"])

    assert compute_visibility(records, "an") == [False, True, False]
    assert first_match(records, "an") == 1


def test_no_match_returns_none() -> None:
    records = flatten(["Apple", "Banana"])

    assert compute_visibility(records, "zzz") == [False, False]
    assert first_match(records, "zzz") is None


def test_custom_filter_is_invoked_for_every_record() -> None:
    calls = []

    def starts_with(search_text, option):
        calls.append(option.index)
        return option.content.startswith(search_text)

    records = flatten(["ab", "ba", "abc"])
    assert compute_visibility(records, "ab", starts_with) == [True, False, True]
    assert calls == [0, 1, 2]


def test_custom_filter_errors_propagate() -> None:
    class Boom(Exception):
        pass

    def exploding(search_text, option):
        raise Boom(option.index)

    with pytest.raises(Boom):
        compute_visibility(flatten(["a"]), "a", exploding)
