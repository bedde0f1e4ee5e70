"""
Tests for the datatype family.

Each datatype is exercised directly through parse/serialize, without a
query string, so that edge cases of the contract are explicit:
    - "first wins" for single-valued datatypes
    - fail-closed behavior for Multiple
    - pass-through vs "Missing value" for Required
"""

import re

import pytest
from safe_search_params.datatypes import (
    Integer,
    Multiple,
    OneOf,
    Present,
    Regex,
    Required,
    String,
)
from safe_search_params.results import Invalid, Valid


class TestString:

    def test_first_value_wins(self):
        assert String().parse(["a", "b"]) == Valid("a")

    def test_absent_is_none(self):
        assert String().parse([]) == Valid(None)

    def test_empty_string_is_kept(self):
        assert String().parse([""]) == Valid("")

    def test_serialize(self):
        assert String().serialize("hey") == ["hey"]
        assert String().serialize(None) == []

    def test_name(self):
        assert String().name == "String"


class TestInteger:

    @pytest.mark.parametrize("raw, expected", [("1", 1), ("0", 0), ("-42", -42), ("123456789012345678901234", 123456789012345678901234)])
    def test_valid(self, raw, expected):
        assert Integer().parse([raw]) == Valid(expected)

    @pytest.mark.parametrize("raw", ["hey", "", "01", "+1", "1.0", "1e3", " 1", "1 ", "-0", "-", "１"])
    def test_invalid(self, raw):
        assert Integer().parse([raw]) == Invalid("Invalid integer")

    def test_absent_is_none(self):
        assert Integer().parse([]) == Valid(None)

    def test_only_first_value_is_checked(self):
        assert Integer().parse(["3", "nope"]) == Valid(3)

    def test_serialize(self):
        assert Integer().serialize(3) == ["3"]
        assert Integer().serialize(-7) == ["-7"]
        assert Integer().serialize(None) == []

    @pytest.mark.parametrize("value, expected", [(3.7, "4"), (3.2, "3"), (2.5, "3"), (-2.5, "-3"), (-0.4, "0"), (3.0, "3")])
    def test_serialize_rounds_floats(self, value, expected):
        assert Integer().serialize(value) == [expected]

    @pytest.mark.parametrize("raw", ["1" * 5000, "-" + "9" * 5000])
    def test_too_many_digits_is_invalid(self, raw):
        assert Integer().parse([raw]) == Invalid("Invalid integer")


class TestPresent:

    def test_present_with_value(self):
        assert Present().parse(["x"]) == Valid(True)

    def test_present_with_empty_value(self):
        assert Present().parse([""]) == Valid(True)

    def test_absent(self):
        assert Present().parse([]) == Valid(False)

    def test_serialize(self):
        assert Present().serialize(True) == [""]
        assert Present().serialize(False) == []


class TestRegex:

    def test_match(self):
        assert Regex(r"^[0-9]+$").parse(["12"]) == Valid("12")

    def test_no_match(self):
        assert Regex(r"^[0-9]+$").parse(["hey"]) == Invalid("Invalid value")

    def test_unanchored_pattern_searches(self):
        assert Regex(r"[0-9]").parse(["a1b"]) == Valid("a1b")

    def test_absent_is_none(self):
        assert Regex(r"^[0-9]+$").parse([]) == Valid(None)

    def test_string_pattern_is_compiled(self):
        dt = Regex(r"^a+$")
        assert isinstance(dt.pattern, re.Pattern)
        assert dt == Regex(re.compile(r"^a+$"))

    def test_accepts_compiled_pattern(self):
        dt = Regex(re.compile(r"^a+$"))
        assert dt.parse(["aaa"]) == Valid("aaa")
        assert dt.name == "Regex<^a+$>"

    def test_name_uses_source(self):
        assert Regex(r"^[0-9]+$").name == "Regex<^[0-9]+$>"


class TestOneOf:

    def test_member(self):
        assert OneOf(["1", "2"]).parse(["2"]) == Valid("2")

    def test_non_member(self):
        assert OneOf(["1", "2"]).parse(["3"]) == Invalid("Invalid value")

    def test_absent_is_none(self):
        assert OneOf(["1", "2"]).parse([]) == Valid(None)

    def test_name(self):
        assert OneOf(["asc", "desc"]).name == "Enum<asc | desc>"

    def test_equal_by_value(self):
        assert OneOf(["a", "b"]) == OneOf(("a", "b"))


class TestMultiple:

    def test_parses_every_value(self):
        dt = Multiple(Integer())
        assert dt.parse(["1", "2", "3"]) == Valid([1, 2, 3])

    def test_empty_is_empty_list(self):
        assert Multiple(String()).parse([]) == Valid([])

    def test_fails_closed(self):
        dt = Multiple(Integer())
        assert dt.parse(["1", "x", "3"]) == Invalid("Invalid value")

    def test_serialize_concatenates(self):
        assert Multiple(String()).serialize(["a", None, "b"]) == ["a", "b"]

    def test_name(self):
        assert Multiple(Integer()).name == "Multiple<Integer>"


class TestRequired:

    def test_passes_value_through(self):
        assert Required(Integer()).parse(["1"]) == Valid(1)

    def test_missing_value(self):
        assert Required(String()).parse([]) == Invalid("Missing value")

    def test_inner_error_unchanged(self):
        assert Required(Integer()).parse(["x"]) == Invalid("Invalid integer")

    def test_false_is_not_missing(self):
        assert Required(Present()).parse([]) == Valid(False)

    def test_serialize_delegates(self):
        assert Required(Integer()).serialize(5) == ["5"]

    def test_name_nests(self):
        assert Required(Multiple(String())).name == "Required<Multiple<String>>"


def test_results_expose_valid_flag():
    assert Valid(None).valid is True
    assert Invalid("nope").valid is False


ODD_INPUTS = [
    ["1" * 5000],
    ["-" + "9" * 5000],
    ["-"],
    ["１２"],
    ["٣"],
    ["\x00"],
    ["x" * 100000],
    ["", "1" * 5000],
]

ALL_DATATYPES = [
    String(),
    Integer(),
    Present(),
    Regex(r"^[0-9]+$"),
    OneOf(["1", "2"]),
    Multiple(Integer()),
    Required(Integer()),
]


@pytest.mark.parametrize("datatype", ALL_DATATYPES, ids=lambda dt: dt.name)
@pytest.mark.parametrize("values", ODD_INPUTS, ids=[f"odd{i}" for i in range(len(ODD_INPUTS))])
def test_parse_returns_a_result_on_odd_input(datatype, values):
    result = datatype.parse(values)
    assert isinstance(result, (Valid, Invalid))
