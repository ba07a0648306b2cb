"""Integer-only arithmetic helpers emulating an unsigned 256-bit register.

Python ints never overflow, so saturation is applied explicitly against
UINT256_MAX to keep results identical to the on-chain fixed-width math.
"""

UINT256_MAX = 2**256 - 1


def saturating_add(a: int, b: int) -> int:
    """Add two unsigned magnitudes, clamping at UINT256_MAX."""
    return min(a + b, UINT256_MAX)


def saturating_mul(a: int, b: int) -> int:
    """Multiply two unsigned magnitudes, clamping at UINT256_MAX."""
    return min(a * b, UINT256_MAX)


def saturating_sub(a: int, b: int) -> int:
    """Subtract b from a, clamping at zero."""
    return a - b if a >= b else 0


def abs_diff(a: int, b: int) -> int:
    """Absolute difference of two unsigned magnitudes."""
    return a - b if a >= b else b - a


def integer_sqrt(n: int) -> int:
    """Floor square root via Newton's method.

    Starts from (n + 1) // 2 and iterates x = (x + n // x) // 2 until the
    sequence stops decreasing.
    """
    if n < 0:
        raise ValueError("Square root of a negative number")
    if n == 0:
        return 0

    x = n
    y = (x + 1) // 2
    while y < x:
        x = y
        y = (x + n // x) // 2
    return x


def div_toward_zero(a: int, b: int) -> int:
    """Signed integer division truncating toward zero (not flooring)."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def scale_percent(value: int, scale: int, base: int) -> int:
    """Express value as a fraction of base in units of 1/scale.

    Returns 0 when base is zero.
    """
    if base <= 0:
        return 0
    return saturating_mul(value, scale) // base
