"""Classic problems over single integers."""

from __future__ import annotations

from itertools import pairwise

_INT_MAX = 2**31 - 1
_UINT32_MASK = 0xFFFFFFFF


def has_alternating_bits(n: int) -> bool:
    """Whether adjacent binary digits of ``n`` always differ."""
    if n <= 0:
        return True
    return all(a != b for a, b in pairwise(bin(n)[2:]))


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n <= 2:
        return n
    a, b = 1, 2
    for _ in range(n - 2):
        a, b = b, a + b
    return b


def to_hex(num: int) -> str:
    """Lower-case hexadecimal of ``num`` as a 32-bit two's complement value."""
    return format(num & _UINT32_MASK, "x")


def hamming_distance(x: int, y: int) -> int:
    """Number of bit positions where ``x`` and ``y`` differ."""
    difference = x ^ y
    return bin(difference).count("1") if difference > 0 else 0


def _digit_square_sum(n: int) -> int:
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Whether repeatedly summing squared digits reaches 1."""
    seen: set[int] = set()
    while n != 1 and n not in seen:
        seen.add(n)
        n = _digit_square_sum(n)
    return n == 1


def find_complement(num: int) -> int:
    """Flip every bit of ``num`` below its highest set bit."""
    if num < 0:
        return ~num
    return num ^ ((1 << num.bit_length()) - 1)


def hamming_weight(n: int) -> int:
    """Number of set bits of ``n`` as a 32-bit value."""
    return bin(n & _UINT32_MASK).count("1")


def is_palindrome_number(x: int) -> bool:
    """Whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    reversed_value = int(str(x)[::-1])
    return reversed_value <= _INT_MAX and reversed_value == x


def is_power_of_three(n: int) -> bool:
    """Whether ``n`` is a power of three."""
    if n <= 0:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def is_power_of_two(n: int) -> bool:
    """Whether ``n`` is a power of two."""
    return n > 0 and n & (n - 1) == 0


def _is_self_dividing(num: int) -> bool:
    remaining = num
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        if digit == 0 or num % digit:
            return False
    return True


def self_dividing_numbers(left: int, right: int) -> list[int]:
    """Numbers in ``[left, right]`` divisible by each of their digits."""
    return [num for num in range(left, right + 1) if _is_self_dividing(num)]


def is_ugly(n: int) -> bool:
    """Whether ``n`` is positive with no prime factors other than 2, 3 and 5."""
    if n <= 0:
        return False
    for factor in (2, 3, 5):
        while n % factor == 0:
            n //= factor
    return n == 1