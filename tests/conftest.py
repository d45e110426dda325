"""Shared fixtures for rsaddr tests.

Valid addresses are built by solving the four parity symbols over GF(32)
so that every syndrome vanishes.
"""

import pytest

from rsaddr.core.alphabet import ALPHABET, BASE, CODEWORD_MAP, DATA_LENGTH
from rsaddr.core.checksum import SYNDROME_COUNT, syndromes
from rsaddr.core.galois import GEXP, ginv, gmult

PARITY_POINTS = (27, 28, 29, 30)


def _solve(matrix, rhs):
    """Gauss-Jordan elimination over GF(32). Subtraction is XOR."""
    n = len(rhs)
    rows = [list(row) + [rhs[r]] for r, row in enumerate(matrix)]
    for col in range(n):
        pivot = next(r for r in range(col, n) if rows[r][col])
        rows[col], rows[pivot] = rows[pivot], rows[col]
        inv = ginv(rows[col][col])
        rows[col] = [gmult(v, inv) for v in rows[col]]
        for r in range(n):
            factor = rows[r][col]
            if r != col and factor:
                rows[r] = [a ^ gmult(factor, b) for a, b in zip(rows[r], rows[col])]
    return [rows[r][n] for r in range(n)]


def encode_codeword(data):
    """Extend 13 data symbols with the 4 parity symbols."""
    assert len(data) == DATA_LENGTH
    base = list(data) + [0] * SYNDROME_COUNT
    matrix = [[GEXP[(i * j) % 31] for j in PARITY_POINTS]
              for i in range(1, SYNDROME_COUNT + 1)]
    parity = _solve(matrix, list(syndromes(base)))
    return tuple(list(data) + parity)


def codeword_to_address(codeword):
    """Lay a codeword out in input order as a bare 17-character string."""
    return "".join(ALPHABET[codeword[CODEWORD_MAP[i]]] for i in range(len(CODEWORD_MAP)))


def _hyphenate(address):
    return "-".join([address[0:4], address[4:8], address[8:12], address[12:]])


def data_symbols(value):
    """Base-32 digits of value, least significant first."""
    digits = []
    for _ in range(DATA_LENGTH):
        digits.append(value % BASE)
        value //= BASE
    return digits


@pytest.fixture
def make_address():
    """Build a valid bare address for an integer (may exceed 64 bits)."""
    def _make(value):
        return codeword_to_address(encode_codeword(data_symbols(value)))
    return _make


@pytest.fixture
def make_codeword():
    def _make(value):
        return encode_codeword(data_symbols(value))
    return _make


@pytest.fixture
def hyphenate():
    """Group a bare address as XXXX-XXXX-XXXX-XXXXX."""
    return _hyphenate
