"""Limb-level magnitude arithmetic.

A magnitude is a sequence of limbs in base RADIX, least-significant limb
first. Apart from normalize(), the routines here ignore signs entirely; the
BigInteger wrapper decides which of them to call and what sign the result
carries.

Every routine returns a fresh list with no most-significant zero limbs, so its
output can be compared or fed back in without further cleanup.
"""

from __future__ import annotations

from collections.abc import Sequence

from bigint.constants import RADIX

__all__ = [
    "trim",
    "normalize",
    "is_zero",
    "compare_magnitudes",
    "add_magnitudes",
    "sub_magnitudes",
    "mul_limb",
    "mul_magnitudes",
    "divide_magnitudes",
]


def trim(limbs: list[int]) -> list[int]:
    """Strip most-significant zero limbs in place, keeping at least one limb."""
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return limbs


def normalize(limbs: list[int], negative: bool) -> tuple[tuple[int, ...], bool]:
    """Return the canonical (limbs, negative) pair for a raw result.

    Strips most-significant zero limbs and clears the sign when the value
    collapses to zero. No other routine touches the sign of zero, so every
    result must pass through here before it is exposed.
    """
    trim(limbs)
    if len(limbs) == 1 and limbs[0] == 0:
        negative = False
    return tuple(limbs), negative


def is_zero(limbs: Sequence[int]) -> bool:
    """True if a trimmed magnitude is zero."""
    return len(limbs) == 1 and limbs[0] == 0


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """Compare two trimmed magnitudes.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return a + b, propagating carries from the least-significant limb."""
    if len(a) < len(b):
        a, b = b, a

    result: list[int] = []
    carry = 0
    for i in range(len(a)):
        total = a[i] + carry
        if i < len(b):
            total += b[i]
        carry, limb = divmod(total, RADIX)
        result.append(limb)

    if carry:
        result.append(carry)
    return result


def sub_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return a - b. The caller guarantees a >= b."""
    result: list[int] = []
    borrow = 0
    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]
        if diff < 0:
            diff += RADIX
            borrow = 1
        else:
            borrow = 0
        result.append(diff)
    return trim(result)


def mul_limb(a: Sequence[int], d: int) -> list[int]:
    """Return a * d for a single limb 0 <= d < RADIX."""
    if d == 0:
        return [0]

    result: list[int] = []
    carry = 0
    for limb in a:
        carry, low = divmod(limb * d + carry, RADIX)
        result.append(low)

    if carry:
        result.append(carry)
    return trim(result)


def mul_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return a * b by schoolbook convolution.

    Row i accumulates a[i] * b[j] into position i + j. The running value per
    position never exceeds RADIX**2, so carries stay below RADIX.
    """
    result = [0] * (len(a) + len(b))

    for i, x in enumerate(a):
        if x == 0:
            continue
        carry = 0
        for j, y in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + x * y + carry, RADIX)
        k = i + len(b)
        while carry:
            carry, result[k] = divmod(result[k] + carry, RADIX)
            k += 1

    return trim(result)


def _largest_fitting_digit(divisor: Sequence[int], remainder: Sequence[int]) -> int:
    """Largest d in [0, RADIX) with divisor * d <= remainder.

    Binary search over the digit range. Requires remainder < divisor * RADIX,
    which long division maintains between steps.
    """
    low, high = 0, RADIX
    while high - low > 1:
        mid = (low + high) // 2
        if compare_magnitudes(mul_limb(divisor, mid), remainder) <= 0:
            low = mid
        else:
            high = mid
    return low


def divide_magnitudes(dividend: Sequence[int], divisor: Sequence[int]) -> list[int]:
    """Return the truncated quotient dividend // divisor.

    Long division by digit estimation: the running remainder starts as the top
    len(divisor) limbs of the dividend, and for each quotient limb (most
    significant first) the largest fitting digit is found, subtracted out, and
    the next lower dividend limb is shifted in.

    Args:
        dividend: Trimmed magnitude
        divisor: Trimmed, non-zero magnitude

    Returns:
        Trimmed quotient magnitude ([0] when dividend has fewer limbs)
    """
    quotient_len = len(dividend) - len(divisor) + 1
    if quotient_len <= 0:
        return [0]

    quotient = [0] * quotient_len
    remainder = trim(list(dividend[quotient_len - 1 :]))

    for position in range(quotient_len - 1, -1, -1):
        digit = _largest_fitting_digit(divisor, remainder)
        quotient[position] = digit
        if digit:
            remainder = sub_magnitudes(remainder, mul_limb(divisor, digit))
        if position:
            # remainder * RADIX + next limb
            remainder = trim([dividend[position - 1], *remainder])

    return trim(quotient)
