"""Bit manipulation helpers with signed 64-bit integer semantics."""

from collections.abc import Iterator

WIDTH = 64
_MASK = (1 << WIDTH) - 1
_SIGN = 1 << (WIDTH - 1)


def _wrap(x: int) -> int:
    """Reduce ``x`` to a signed 64-bit value."""
    x &= _MASK
    return x - (1 << WIDTH) if x & _SIGN else x


def _unsigned(x: int) -> int:
    return x & _MASK


def _check_index(b: int) -> None:
    if not 0 <= b < WIDTH:
        raise ValueError(f"bit index {b} is outside 0..{WIDTH - 1}")


def _require_nonzero(x: int, what: str) -> None:
    if _wrap(x) == 0:
        raise ValueError(f"{what} is undefined for zero")


def shift_right(x: int, b: int) -> int:
    """Arithmetic right shift of ``x`` by ``b`` bits."""
    _check_index(b)
    return _wrap(x) >> b


def shift_left(x: int, b: int) -> int:
    """Left shift of ``x`` by ``b`` bits, wrapped to 64 bits."""
    _check_index(b)
    return _wrap(x << b)


def turn_on(x: int, b: int) -> int:
    """Set bit ``b`` of ``x``."""
    _check_index(b)
    return _wrap(x | (1 << b))


def turn_off(x: int, b: int) -> int:
    """Clear bit ``b`` of ``x``."""
    _check_index(b)
    return _wrap(x & ~(1 << b))


def toggle(x: int, b: int) -> int:
    """Flip bit ``b`` of ``x``."""
    _check_index(b)
    return _wrap(x ^ (1 << b))


def lowest_active(x: int) -> int:
    """Value of the lowest set bit of ``x`` (zero for zero)."""
    x = _wrap(x)
    return _wrap(x & -x)


def all_on(b: int) -> int:
    """Mask with bits ``0..b-1`` set."""
    _check_index(b)
    return _wrap((1 << b) - 1)


def submasks(x: int) -> Iterator[int]:
    """Yield every non-empty submask of ``x`` in decreasing order."""
    x = _wrap(x)
    mask = x
    while mask > 0:
        yield mask
        mask = x & (mask - 1)


def check_bit(x: int, b: int) -> bool:
    """Whether bit ``b`` of ``x`` is set."""
    _check_index(b)
    return (_unsigned(x) >> b) & 1 == 1


def count_set(x: int) -> int:
    """Number of set bits in the 64-bit representation of ``x``."""
    return bin(_unsigned(x)).count("1")


def trailing_zeros(x: int) -> int:
    """Number of trailing zero bits; ``x`` must be non-zero."""
    _require_nonzero(x, "trailing zero count")
    u = _unsigned(x)
    return (u & -u).bit_length() - 1


def leading_zeros(x: int) -> int:
    """Number of leading zero bits in 64 bits; ``x`` must be non-zero."""
    _require_nonzero(x, "leading zero count")
    return WIDTH - _unsigned(x).bit_length()


def rightmost_bits(n: int) -> int:
    """Mask with the ``n`` lowest bits set."""
    return all_on(n)


def bit_pattern(x: int) -> list[int]:
    """The 64 bits of ``x``, least significant first."""
    u = _unsigned(x)
    return [(u >> i) & 1 for i in range(WIDTH)]


def highest_set_bit(x: int) -> int:
    """Zero-based position of the highest set bit."""
    return WIDTH - 1 - leading_zeros(x)


def lowest_set_bit(x: int) -> int:
    """Zero-based position of the lowest set bit."""
    return trailing_zeros(x)


def bitwise_and(x: int, y: int) -> int:
    return _wrap(x & y)


def bitwise_or(x: int, y: int) -> int:
    return _wrap(x | y)


def bitwise_xor(x: int, y: int) -> int:
    return _wrap(x ^ y)


def bitwise_not(x: int) -> int:
    return _wrap(~x)


def has_exactly_one_bit_set(x: int) -> bool:
    """Whether exactly one bit of the 64-bit value is set."""
    x = _wrap(x)
    return x != 0 and (x & _wrap(x - 1)) == 0


def bit_length(x: int) -> int:
    """Number of bits needed to represent ``x`` in 64-bit form."""
    return WIDTH - leading_zeros(x)