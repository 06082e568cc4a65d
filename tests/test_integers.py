import pytest

from algosolve.integers import (
    climb_stairs,
    find_complement,
    hamming_distance,
    hamming_weight,
    has_alternating_bits,
    is_happy,
    is_palindrome_number,
    is_power_of_three,
    is_power_of_two,
    is_ugly,
    self_dividing_numbers,
    to_hex,
)


@pytest.mark.parametrize("k", range(1, 8))
def test_alternating_patterns(k):
    assert has_alternating_bits(int("10" * k, 2))
    assert has_alternating_bits(int("1" + "01" * k, 2))
    assert not has_alternating_bits(int("11" + "01" * k, 2))


def test_alternating_bits_of_zero():
    assert has_alternating_bits(0)


def test_climb_stairs_small():
    assert climb_stairs(1) == 1
    assert climb_stairs(2) == 2


def test_climb_stairs_recurrence():
    for n in range(3, 40):
        assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_climb_stairs_rejects_negative():
    with pytest.raises(ValueError):
        climb_stairs(-3)


@pytest.mark.parametrize("n", [0, 1, 26, 255, 4096, 2**31 - 1])
def test_to_hex_round_trip(n):
    text = to_hex(n)
    assert int(text, 16) == n
    assert text == text.lower()


def test_to_hex_negative():
    assert to_hex(-1) == "ffffffff"
    assert int(to_hex(-26), 16) == 2**32 - 26


def test_hamming_distance():
    for x, y in [(1, 4), (3, 1), (1023, 5), (0, 77)]:
        assert hamming_distance(x, y) == hamming_distance(y, x)
        assert hamming_distance(x, y) == hamming_weight(x ^ y)
        assert hamming_distance(x, x) == hamming_distance(y, y)
        assert hamming_distance(x, 0) == hamming_weight(x)


def test_is_happy():
    assert is_happy(1)
    assert is_happy(19)
    assert not is_happy(2)
    assert is_happy(91) == is_happy(19)


def test_find_complement():
    for n in range(1, 300):
        complement = find_complement(n)
        assert complement & n == 0
        assert complement | n == (1 << n.bit_length()) - 1


def test_hamming_weight():
    for k in range(31):
        assert hamming_weight(2**k) == 1
        assert hamming_weight(2**k - 1) == k
    assert hamming_weight(-1) == 32


@pytest.mark.parametrize("half", [1, 12, 345, 9, 10])
def test_palindrome_number(half):
    text = str(half)
    assert is_palindrome_number(int(text + text[::-1]))
    assert is_palindrome_number(int(text + text[-2::-1] if len(text) > 1 else text))


def test_not_palindrome_number():
    assert not is_palindrome_number(-121)
    assert not is_palindrome_number(10)
    assert not is_palindrome_number(123)


def test_power_of_three():
    for k in range(19):
        assert is_power_of_three(3**k)
    for k in range(1, 19):
        assert not is_power_of_three(3**k + 1)
    assert not is_power_of_three(0)
    assert not is_power_of_three(-3)


def test_power_of_two():
    for k in range(31):
        assert is_power_of_two(2**k)
    for k in range(2, 31):
        assert not is_power_of_two(2**k + 1)
    assert not is_power_of_two(0)
    assert not is_power_of_two(-2)


def test_self_dividing_numbers():
    result = self_dividing_numbers(1, 200)
    assert result == sorted(result)
    assert set(range(1, 10)) <= set(result)
    assert 10 not in result
    for num in result:
        assert all(d != "0" and num % int(d) == 0 for d in str(num))


def test_self_dividing_empty_range():
    assert self_dividing_numbers(5, 4) == []


def test_is_ugly():
    for a in range(4):
        for b in range(4):
            for c in range(4):
                value = 2**a * 3**b * 5**c
                assert is_ugly(value)
                assert not is_ugly(value * 7)
    assert not is_ugly(0)
    assert not is_ugly(-6)