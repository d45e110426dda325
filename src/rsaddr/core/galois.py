"""GF(32) arithmetic for the address checksum.

Field elements are the integers 0-31. Multiplication goes through the
exponent/log tables of the generator alpha = 2; 0 is handled as a
sentinel because it has no logarithm.
"""

# GEXP[k] = alpha^k. The multiplicative group has order 31, so GEXP[31] == GEXP[0].
GEXP = (1, 2, 4, 8, 16, 5, 10, 20, 13, 26, 17, 7, 14, 28, 29, 31,
        27, 19, 3, 6, 12, 24, 21, 15, 30, 25, 23, 11, 22, 9, 18, 1)

# GLOG[x] = k such that alpha^k == x. GLOG[0] is a placeholder.
GLOG = (0, 0, 1, 18, 2, 5, 19, 11, 3, 29, 6, 27, 20, 8, 12, 23,
        4, 10, 30, 17, 7, 22, 28, 26, 21, 25, 9, 16, 13, 14, 24, 15)

ORDER = 31  # size of the multiplicative group


def gmult(a: int, b: int) -> int:
    """Multiply two field elements."""
    if a == 0 or b == 0:
        return 0
    return GEXP[(GLOG[a] + GLOG[b]) % ORDER]


def ginv(a: int) -> int:
    """Return the multiplicative inverse of a nonzero field element."""
    if not 0 < a < 32:
        raise ValueError(f"Field element must be 1-31, got {a}")
    return GEXP[(ORDER - GLOG[a]) % ORDER]
