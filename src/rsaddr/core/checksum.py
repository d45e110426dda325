"""Four-syndrome checksum over the 17-symbol address codeword.

The codeword is a shortened (31,13) Reed-Solomon code over GF(32).
Evaluation points 0-12 hold data, 27-30 hold parity; points 13-26 are
never stored and always zero. A codeword is accepted when all four
syndromes vanish.
"""

from typing import Sequence

from .alphabet import CODEWORD_LENGTH
from .galois import GEXP, ORDER, gmult

SYNDROME_COUNT = 4

# Evaluation point j -> storage position in the 17-symbol codeword
EVALUATION_POINTS = tuple(
    (j, j if j <= 26 else j - 14)
    for j in range(ORDER)
    if not 12 < j < 27
)


def _check_length(codeword: Sequence[int]) -> None:
    if len(codeword) != CODEWORD_LENGTH:
        raise ValueError(
            f"Codeword must have {CODEWORD_LENGTH} symbols, got {len(codeword)}")


def syndrome(codeword: Sequence[int], i: int) -> int:
    """Evaluate check equation i (1-4) over the codeword."""
    _check_length(codeword)
    t = 0
    for j, pos in EVALUATION_POINTS:
        t ^= gmult(codeword[pos], GEXP[(i * j) % ORDER])
    return t


def syndromes(codeword: Sequence[int]) -> tuple[int, ...]:
    """Return the four syndromes of a 17-symbol codeword."""
    return tuple(syndrome(codeword, i) for i in range(1, SYNDROME_COUNT + 1))


def is_codeword_valid(codeword: Sequence[int]) -> bool:
    """True if every syndrome is zero."""
    total = 0
    for s in syndromes(codeword):
        total |= s
    return total == 0
