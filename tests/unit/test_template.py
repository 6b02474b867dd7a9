"""Tests for replacement template parsing and substitution."""
import pytest

from dynbadge.extraction import Document, MatchResult, compile_matcher, extract, substitute
from dynbadge.extraction.template import Empty, GroupRef, Literal, NamedRef, parse_template


def _match(pattern, text):
    return extract(compile_matcher(pattern), Document(text))


class TestParseTemplate:
    def test_literal_only(self):
        assert parse_template("version", 0) == (Literal("version"),)

    def test_group_reference_between_literals(self):
        assert parse_template("v$1!", 1) == (Literal("v"), GroupRef(1), Literal("!"))

    def test_dollar_escape_merges_into_literal(self):
        assert parse_template("$$5", 1) == (Literal("$5"),)

    def test_whole_match_reference(self):
        assert parse_template("[$&]", 0) == (Literal("["), GroupRef(0), Literal("]"))

    def test_prefix_and_suffix_references(self):
        assert parse_template("$`$'", 0) == (Empty(), Empty())

    def test_two_digit_reference_when_group_exists(self):
        assert parse_template("$10", 10) == (GroupRef(10),)

    def test_two_digit_falls_back_to_one_digit(self):
        assert parse_template("$10", 1) == (GroupRef(1), Literal("0"))

    def test_named_reference(self):
        assert parse_template("$<v>", 1, (("v", 1),)) == (NamedRef("v"),)

    def test_named_syntax_literal_without_named_groups(self):
        assert parse_template("$<v>", 1) == (Literal("$<v>"),)

    def test_unterminated_named_reference_is_literal(self):
        assert parse_template("$<v", 1, (("v", 1),)) == (Literal("$<v"),)

    def test_trailing_dollar_is_literal(self):
        assert parse_template("cost $", 0) == (Literal("cost $"),)

    def test_dollar_before_other_character_is_literal(self):
        assert parse_template("$x", 0) == (Literal("$x"),)

    def test_empty_template(self):
        assert parse_template("", 3) == ()


class TestSubstitute:
    def test_no_template_returns_full_match(self, sample_text):
        match = _match("serves (.*?) billion", sample_text)
        assert substitute(match) == match.full_match
        assert substitute(match, None) == "serves 2.4 billion"

    def test_first_group(self, sample_text):
        match = _match("serves (.*?) billion", sample_text)
        assert substitute(match, "$1") == "2.4"

    def test_literal_only_template_returned_unchanged(self, sample_text):
        match = _match("serves (.*?) billion", sample_text)
        assert substitute(match, "many") == "many"

    def test_empty_template_gives_empty_string(self, sample_text):
        match = _match("serves", sample_text)
        assert substitute(match, "") == ""

    @pytest.mark.parametrize("template", ["$2", "$9", "$0$5"])
    def test_out_of_range_group_is_empty(self, template):
        match = MatchResult(full_match="abc", groups=("b",))
        expected = "abc" if template.startswith("$0") else ""
        assert substitute(match, template) == expected

    def test_non_participating_group_is_empty(self):
        match = _match("(a)|(b)", "b")
        assert substitute(match, "[$1][$2]") == "[][b]"

    def test_reordering_groups(self):
        match = _match(r"(\d+)-(\d+)", "range 10-20")
        assert substitute(match, "$2..$1") == "20..10"

    def test_whole_match_and_escape(self):
        match = _match(r"\d+", "cost 5")
        assert substitute(match, "$$$&") == "$5"

    def test_named_group(self):
        match = _match(r"(?P<major>\d+)\.(?P<minor>\d+)", "version 2.4")
        assert substitute(match, "$<minor>.$<major>") == "4.2"
        assert substitute(match, "[$<patch>]") == "[]"

    def test_named_group_angle_bracket_syntax(self):
        match = _match(r"(?<major>\d+)\.(?<minor>\d+)", "version 2.4")
        assert substitute(match, "$<minor>.$<major>") == "4.2"

    def test_eleven_groups(self):
        pattern = "".join(f"({c})" for c in "abcdefghijk")
        match = _match(pattern, "abcdefghijk")
        assert substitute(match, "$11$10$1") == "kja"
        assert substitute(match, "$12") == "a2"

    def test_prefix_suffix_references_are_empty(self):
        match = _match("b", "abc")
        assert substitute(match, "$`|$&|$'") == "|b|"
