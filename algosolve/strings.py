"""Classic problems over strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import groupby, pairwise, zip_longest

_KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")
_ROW_OF = {
    char: index
    for index, row in enumerate(_KEYBOARD_ROWS)
    for char in row + row.upper()
}
_VOWELS = frozenset("aeiouAEIOU")
_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_OPENERS = frozenset("({[")
_MATCHING_OPENER = {")": "(", "}": "{", "]": "["}


def add_binary(a: str, b: str) -> str:
    """Sum of two binary numbers given as digit strings."""
    bits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, bit = divmod(carry + int(x) + int(y), 2)
        bits.append(str(bit))
    while carry:
        carry, bit = divmod(carry, 2)
        bits.append(str(bit))
    return "".join(reversed(bits))


def count_binary_substrings(s: str) -> int:
    """Substrings with equal, grouped runs of zeros and ones."""
    runs = [0, *(len(list(group)) for _, group in groupby(s))]
    return sum(min(a, b) for a, b in pairwise(runs))


def convert_to_title(column_number: int) -> str:
    """Spreadsheet column title for a 1-based column number."""
    letters: list[str] = []
    while column_number > 0:
        column_number, remainder = divmod(column_number - 1, 26)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def fizz_buzz(n: int) -> list[str]:
    """The FizzBuzz sequence from 1 to ``n``."""
    answer: list[str] = []
    for i in range(1, n + 1):
        if i % 15 == 0:
            answer.append("FizzBuzz")
        elif i % 3 == 0:
            answer.append("Fizz")
        elif i % 5 == 0:
            answer.append("Buzz")
        else:
            answer.append(str(i))
    return answer


def find_words(words: Sequence[str]) -> list[str]:
    """Words that can be typed using a single keyboard row."""
    result: list[str] = []
    for word in words:
        if not word:
            continue
        row = _ROW_OF.get(word[0], 0)
        if all(_ROW_OF.get(char, 0) == row for char in word):
            result.append(word)
    return result


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word."""
    return len(s.rstrip(" ").split(" ")[-1])


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest prefix shared by every string."""
    if not strs:
        return ""
    prefix = strs[0]
    for text in strs[1:]:
        while not text.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def longest_palindrome(s: str) -> int:
    """Length of the longest palindrome buildable from the letters of ``s``."""
    counts = Counter(s).values()
    length = sum(count - count % 2 for count in counts)
    return length + 1 if any(count % 2 for count in counts) else length


def find_lus_length(a: str, b: str) -> int:
    """Length of the longest uncommon subsequence, or -1 when none exists."""
    return -1 if a == b else max(len(a), len(b))


def repeated_substring_pattern(s: str) -> bool:
    """Whether ``s`` is some substring repeated at least twice."""
    if not s:
        raise ValueError("repeated_substring_pattern() needs a non-empty string")
    return s in (s + s)[1:-1]


def reverse_string(chars: list[str]) -> None:
    """Reverse a list of characters in place."""
    chars.reverse()


def reverse_str(s: str, k: int) -> str:
    """Reverse the first ``k`` characters of every ``2k`` block."""
    if k <= 0:
        raise ValueError("k must be positive")
    return "".join(
        s[i : i + k][::-1] + s[i + k : i + 2 * k] for i in range(0, len(s), 2 * k)
    )


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels, leaving other characters in place."""
    swapped = iter([char for char in reversed(s) if char in _VOWELS])
    return "".join(next(swapped) if char in _VOWELS else char for char in s)


def reverse_words(s: str) -> str:
    """Reverse the characters of each space-separated word, keeping spacing."""
    return " ".join(word[::-1] for word in s.split(" "))


def judge_circle(moves: str) -> bool:
    """Whether a sequence of U/D/L/R moves returns to the origin."""
    counts = Counter(moves)
    return counts["R"] == counts["L"] and counts["U"] == counts["D"]


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral; unknown characters count as zero."""
    values = [_ROMAN.get(char, 0) for char in s]
    total = 0
    for current, following in zip_longest(values, values[1:], fillvalue=0):
        total += -current if current < following else current
    return total


def check_record(s: str) -> bool:
    """Whether an attendance record has under two absences and no three lates in a row."""
    return s.count("A") < 2 and "LLL" not in s


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def _is_palindrome(s: str, left: int, right: int) -> bool:
    segment = s[left : right + 1]
    return segment == segment[::-1]


def valid_palindrome(s: str) -> bool:
    """Whether ``s`` becomes a palindrome after deleting at most one character."""
    left, right = 0, len(s) - 1
    while left < right:
        if s[left] != s[right]:
            return _is_palindrome(s, left + 1, right) or _is_palindrome(
                s, left, right - 1
            )
        left += 1
        right -= 1
    return True


def is_valid_parentheses(s: str) -> bool:
    """Whether the brackets in ``s`` are balanced and properly nested."""
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        opener = stack.pop()
        if char in _MATCHING_OPENER and opener != _MATCHING_OPENER[char]:
            return False
    return not stack