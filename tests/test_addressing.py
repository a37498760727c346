"""
Unit tests for spreadsheet column addressing
"""
import pytest

from schemaforge.errors import InvalidAddress
from schemaforge.spreadsheet.addressing import index_to_letter, letter_to_index


class TestLetterToIndex:
    """Base-26 letters to zero-based index."""

    @pytest.mark.parametrize("letters,expected", [
        ("A", 0),
        ("Z", 25),
        ("AA", 26),
        ("AZ", 51),
        ("BA", 52),
        ("ZZ", 701),
        ("AAA", 702),
    ])
    def test_known_addresses(self, letters, expected):
        assert letter_to_index(letters) == expected

    def test_lower_case_is_accepted(self):
        assert letter_to_index("ab") == letter_to_index("AB") == 27

    @pytest.mark.parametrize("letters", ["", "A1", "1", "A B", "É", "-", "ß", "ı"])
    def test_invalid_addresses_raise(self, letters):
        with pytest.raises(InvalidAddress):
            letter_to_index(letters)

    def test_invalid_address_is_a_value_error(self):
        with pytest.raises(ValueError):
            letter_to_index("")

    def test_none_raises(self):
        with pytest.raises(InvalidAddress):
            letter_to_index(None)


class TestIndexToLetter:
    """Zero-based index back to letters."""

    @pytest.mark.parametrize("index,expected", [(0, "A"), (25, "Z"), (26, "AA"), (51, "AZ")])
    def test_known_indices(self, index, expected):
        assert index_to_letter(index) == expected

    def test_inverse_of_letter_to_index(self):
        for index in (0, 1, 25, 26, 700, 701, 702, 16383):
            assert letter_to_index(index_to_letter(index)) == index

    def test_negative_index_raises(self):
        with pytest.raises(InvalidAddress):
            index_to_letter(-1)
