"""
Column address resolution - spreadsheet letters <-> zero-based indices

    A -> 0, Z -> 25, AA -> 26, AZ -> 51
"""

from ..errors import InvalidAddress


def letter_to_index(letters: str) -> int:
    """
    Convert base-26 column letters to a zero-based index.

    Args:
        letters: Column letters, case-insensitive ("A", "b", "AA")

    Returns:
        Zero-based column index

    Raises:
        InvalidAddress: on empty input or any character outside A-Z
    """
    if not isinstance(letters, str) or not letters or not letters.isascii():
        raise InvalidAddress(letters)

    index = 0
    for ch in letters.upper():
        if not ("A" <= ch <= "Z"):
            raise InvalidAddress(letters)
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index - 1


def index_to_letter(index: int) -> str:
    """Convert a zero-based index back to column letters (0 -> "A")."""
    if not isinstance(index, int) or index < 0:
        raise InvalidAddress(index)

    letters = ""
    n = index + 1
    while n:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters
