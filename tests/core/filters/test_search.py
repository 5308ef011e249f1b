import pytest

from core.filters.search import SearchTerm
from core.models.errors import ValidationError
from core.utils.constants import ERROR_CODE_INVALID_SEARCH


class TestSearchTermValidate:
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_absent_or_blank_is_none(self, raw) -> None:
        assert SearchTerm.validate(raw) is None

    @pytest.mark.parametrize("raw", ["mug", "Red mug", "t-shirt", "42", "Кружка", "  cup  "])
    def test_safe_terms_are_accepted(self, raw) -> None:
        assert SearchTerm.validate(raw) == raw.strip()

    @pytest.mark.parametrize("raw", [".*", "a|b", "(x)", "$ne", "mug?", "[a-z]", "a\\d"])
    def test_pattern_syntax_is_rejected(self, raw) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SearchTerm.validate(raw)

        assert exc_info.value.error_code == ERROR_CODE_INVALID_SEARCH

    @pytest.mark.parametrize("raw", [["mug", "cup"], {"$regex": ".*"}, 5])
    def test_non_string_is_rejected(self, raw) -> None:
        with pytest.raises(ValidationError):
            SearchTerm.validate(raw)


class TestSearchTermMatching:
    def test_pattern_is_case_insensitive_substring(self) -> None:
        pattern = SearchTerm.pattern("red MUG")

        assert pattern.search("A Red Mug for tea")
        assert not pattern.search("red cup")

    def test_pattern_escapes_hyphen_literally(self) -> None:
        pattern = SearchTerm.pattern("t-shirt")

        assert pattern.search("Blue T-Shirt")
        assert not pattern.search("tshirt")

    @pytest.mark.parametrize(
        "term,expected",
        [
            ("42", 42),
            ("42.0", 42),
            ("42.5", None),
            ("mug", None),
            ("1e3", 1000),
            ("1_0", None),
            ("١٢", None),
            ("1e19", None),
            ("99999999999999999999", None),
        ],
    )
    def test_as_number(self, term, expected) -> None:
        assert SearchTerm.as_number(term) == expected
