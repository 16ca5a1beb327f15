"""
Tests for the typed field comparators.
"""

import pytest

from packet_compare.comparators import (
    HANDLING_ORDERS,
    CardinalComparator,
    Comparator,
    DateComparator,
    ExactMapComparator,
    NoneComparator,
    PhoneNumberComparator,
    TimeComparator,
    comparator_for,
    compare_cardinal,
    compare_checkbox,
    compare_date,
    compare_exact,
    compare_exact_map,
    compare_none,
    compare_phone_number,
    compare_real,
    compare_time,
)
from packet_compare.config import Settings


class TestExact:
    """Tests for exact and mapped comparisons."""

    def test_match(self):
        cf = compare_exact("Msg #", "XSC-101P", "XSC-101P")
        assert (cf.score, cf.out_of) == (2, 2)
        assert (cf.expected_mask, cf.actual_mask) == (" ", " ")

    def test_mismatch(self):
        cf = compare_exact("Msg #", "XSC-101P", "xsc-101p")
        assert (cf.score, cf.out_of) == (0, 2)
        assert (cf.expected_mask, cf.actual_mask) == ("*", "*")

    def test_empty_side_shown_as_not_set(self):
        cf = compare_exact("Msg #", "XSC-101P", "")
        assert cf.expected == "XSC-101P"
        assert cf.actual == "(not set)"

    def test_exact_map_display(self):
        cf = compare_exact_map("Handling", "P", "R", HANDLING_ORDERS)
        assert (cf.score, cf.out_of) == (0, 2)
        assert (cf.expected, cf.actual) == ("PRIORITY", "ROUTINE")

    def test_exact_map_match(self):
        cf = ExactMapComparator(HANDLING_ORDERS).compare("Handling", "I", "I")
        assert cf.score == 2
        assert cf.expected == cf.actual == "IMMEDIATE"

    def test_exact_map_unmapped_values(self):
        cf = compare_exact_map("Handling", "X", "", HANDLING_ORDERS)
        assert (cf.expected, cf.actual) == ("X", "(not set)")


class TestCheckbox:
    """Tests for checkbox comparison."""

    def test_checked_match(self):
        cf = compare_checkbox("Take Action", "checked", "checked")
        assert cf.score == 2
        assert cf.expected == "checked"

    def test_false_match_blanks_display(self):
        cf = compare_checkbox("Take Action", "false", "false")
        assert cf.score == 2
        assert (cf.expected, cf.actual) == ("", "")

    def test_unchecked_actual(self):
        cf = compare_checkbox("Take Action", "checked", "")
        assert (cf.score, cf.out_of) == (0, 2)
        assert (cf.expected, cf.actual) == ("checked", "not checked")

    def test_unchecked_expected(self):
        cf = compare_checkbox("Take Action", "false", "checked")
        assert cf.score == 0
        assert (cf.expected, cf.actual) == ("not checked", "checked")


class TestNumbers:
    """Tests for cardinal and real number comparison."""

    def test_cardinal_leading_zeros(self):
        cf = compare_cardinal("Count", "7", "007")
        assert (cf.score, cf.out_of) == (2, 2)
        assert (cf.expected, cf.actual) == ("7", "007")

    def test_cardinal_mismatch(self):
        cf = compare_cardinal("Count", "7", "8")
        assert cf.score == 0
        assert cf.actual_mask == "*"

    def test_cardinal_falls_back_to_exact(self):
        assert compare_cardinal("Count", "seven", "seven").score == 2
        assert compare_cardinal("Count", "7", "7.0").score == 0
        assert compare_cardinal("Count", "", "7").expected == "(not set)"

    def test_real_equivalent_spellings(self):
        assert compare_real("Freq", "1.5", "1.50").score == 2
        assert compare_real("Freq", "146.520", "146.52").score == 2

    def test_real_mismatch(self):
        assert compare_real("Freq", "1.5", "1.6").score == 0
        assert compare_real("Freq", "abc", "abc").score == 2

    @pytest.mark.parametrize(
        "expected,actual",
        [("1_000", "1000"), (" 7 ", "7"), ("7\n", "7"), ("٧", "7"), ("７", "7")],
        ids=["underscore", "spaces", "newline", "arabic-indic", "fullwidth"],
    )
    def test_cardinal_requires_plain_ascii_digits(self, expected, actual):
        cf = compare_cardinal("Count", expected, actual)
        assert (cf.score, cf.out_of) == (0, 2)

    def test_cardinal_sign(self):
        assert compare_cardinal("Count", "+7", "7").score == 2
        assert compare_cardinal("Count", "-0", "0").score == 2

    @pytest.mark.parametrize(
        "expected,actual",
        [("1_0.5", "10.5"), (" 1.5", "1.5"), ("1.5\u00a0", "1.5"), ("١.5", "1.5")],
        ids=["underscore", "leading-space", "nbsp", "arabic-indic"],
    )
    def test_real_requires_plain_ascii_number(self, expected, actual):
        cf = compare_real("Freq", expected, actual)
        assert (cf.score, cf.out_of) == (0, 2)

    def test_real_spellings(self):
        assert compare_real("Freq", ".5", "0.5").score == 2
        assert compare_real("Freq", "1e3", "1000").score == 2
        assert compare_real("Freq", "5.", "5").score == 2


class TestDate:
    """Tests for date comparison."""

    def test_identical(self):
        cf = compare_date("Date", "01/02/2024", "01/02/2024")
        assert cf.score == 2
        assert cf.expected_mask == " "

    def test_missing_leading_zeros_forgiven(self):
        cf = compare_date("Date", "1/2/2024", "01/02/2024")
        assert (cf.score, cf.out_of) == (2, 2)
        assert cf.expected_mask == "        "
        assert cf.actual_mask == "~  ~      "

    def test_missing_leading_zero_penalty_setting(self):
        comparator = DateComparator(Settings(leading_zero_penalty=1))
        cf = comparator.compare("Date", "01/02/2024", "1/02/2024")
        assert cf.score == 1
        assert cf.expected_mask == "~         "
        assert cf.actual_mask == "         "

    def test_day_mismatch(self):
        cf = compare_date("Date", "01/02/2024", "01/03/2024")
        assert (cf.score, cf.out_of) == (0, 2)
        assert cf.expected_mask == "   **     "
        assert cf.actual_mask == "   **     "

    def test_separator_difference(self):
        cf = compare_date("Date", "01/02/2024", "01-02-2024")
        assert cf.score == 1
        assert cf.actual_mask == "  ~  ~    "

    def test_century_omitted(self):
        cf = compare_date("Date", "01/02/24", "01/02/2024")
        assert cf.score == 1
        assert cf.expected_mask == "        "
        assert cf.actual_mask == "      ~~  "

    def test_year_mismatch(self):
        cf = compare_date("Date", "01/02/2024", "01/02/2023")
        assert cf.score == 0
        assert cf.actual_mask == "        **"

    def test_unparseable(self):
        cf = compare_date("Date", "01/02/2024", "tomorrow")
        assert cf.score == 0
        assert cf.actual_mask == "*"
        assert compare_date("Date", "", "01/02/2024").expected == "(not set)"

    @pytest.mark.parametrize(
        "expected,actual",
        [("01/02/2024\n", "01/02/2024"), ("01/02/2024", "01/02/2024\n"),
         ("٠١/02/2024", "01/02/2024")],
        ids=["trailing-newline-expected", "trailing-newline-actual", "arabic-indic"],
    )
    def test_unparseable_near_misses(self, expected, actual):
        cf = compare_date("Date", expected, actual)
        assert (cf.score, cf.out_of) == (0, 2)
        assert cf.expected_mask == cf.actual_mask == "*"


class TestTime:
    """Tests for time comparison."""

    def test_missing_colon(self):
        cf = compare_time("Time", "09:30", "0930")
        assert cf.score == 1
        assert cf.expected_mask == "  ~  "
        assert cf.actual_mask == "    "

    def test_missing_leading_zero(self):
        assert compare_time("Time", "09:30", "9:30").score == 2
        strict = TimeComparator(Settings(leading_zero_penalty=1))
        assert strict.compare("Time", "09:30", "9:30").score == 1

    def test_minute_mismatch(self):
        cf = compare_time("Time", "09:30", "09:31")
        assert cf.score == 0
        assert cf.expected_mask == "   **"

    def test_hour_mismatch(self):
        assert compare_time("Time", "09:30", "10:30").score == 0

    def test_unparseable(self):
        assert compare_time("Time", "12:5", "12:05").score == 0

    def test_trailing_newline_unparseable(self):
        assert compare_time("Time", "09:30\n", "09:30").score == 0
        assert compare_time("Time", "09:30", "٩:30").score == 0


class TestPhoneNumber:
    """Tests for phone number comparison."""

    def test_identical(self):
        cf = compare_phone_number("Phone", "408-555-1212", "408-555-1212")
        assert cf.score == 2
        assert cf.actual_mask == " "

    def test_punctuation_difference_is_minor(self):
        cf = compare_phone_number("Phone", "(408) 555-1212", "408-555-1212")
        assert (cf.score, cf.out_of) == (1, 2)
        assert (cf.expected_mask, cf.actual_mask) == ("~", "~")

    def test_punctuation_penalty_setting(self):
        comparator = PhoneNumberComparator(Settings(phone_punctuation_penalty=0))
        cf = comparator.compare("Phone", "(408) 555-1212", "408.555.1212")
        assert cf.score == 2
        assert cf.actual_mask == " "

    def test_different_digits(self):
        cf = compare_phone_number("Phone", "408-555-1212", "408-555-1213")
        assert cf.score == 0
        assert cf.actual_mask == "*"

    def test_missing_number(self):
        cf = compare_phone_number("Phone", "", "555-1212")
        assert cf.expected == "(not set)"
        assert cf.score == 0


class TestRegistry:
    """Tests for comparator lookup and the comparator interface."""

    def test_none_excludes_field(self):
        assert compare_none("Op Call", "KK6ABC", "KN6XYZ") is None
        assert NoneComparator().compare("Op Call", "a", "b") is None

    def test_comparator_for(self):
        assert isinstance(comparator_for("date"), DateComparator)
        assert isinstance(comparator_for(" Cardinal "), CardinalComparator)
        assert comparator_for("text") is comparator_for("TEXT")

    def test_comparator_for_unknown(self):
        with pytest.raises(ValueError, match="Unknown comparator kind"):
            comparator_for("color")

    def test_comparators_are_callable(self):
        assert comparator_for("exact")("Label", "a", "a").score == 2

    def test_base_class_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Comparator().compare("l", "a", "b")

    def test_score_bounds(self):
        values = ["", "0", "7", "007", "1.5", "01/02/2024", "1/2/24", "09:30", "930",
                  "false", "checked", "(408) 555-1212", "Hello World"]
        for kind in ("exact", "text", "date", "time", "cardinal", "real", "phone",
                     "checkbox", "handling"):
            comparator = comparator_for(kind)
            for expected in values:
                for actual in values:
                    cf = comparator.compare("l", expected, actual)
                    assert 0 <= cf.score <= cf.out_of, (kind, expected, actual)

    def test_handling_kind(self):
        comparator = comparator_for("handling")
        assert isinstance(comparator, ExactMapComparator)
        assert comparator.mapping == HANDLING_ORDERS
