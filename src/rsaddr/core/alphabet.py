"""Alphabet mapping for Reed-Solomon account addresses.

Alphabet: 2-9, A-Z minus I and O (32 symbols, no 0/1/I/O confusion)
Each character carries one 5-bit symbol value 0-31.
An address holds 17 symbols: 13 data symbols and 4 parity symbols.
"""

# The 32-symbol alphabet, position = symbol value
ALPHABET = "23456789ABCDEFGHJKLMNPQRSTUVWXYZ"
BASE = len(ALPHABET)  # 32

CODEWORD_LENGTH = 17
DATA_LENGTH = 13

# Reverse lookup: character -> symbol value
CHAR_TO_INDEX = {c: i for i, c in enumerate(ALPHABET)}

# i-th valid input character -> canonical codeword slot
CODEWORD_MAP = (3, 2, 1, 0, 7, 6, 5, 4, 13, 14, 15, 16, 12, 8, 9, 10, 11)

# Network prefixes written in front of an address
NETWORK_PREFIXES = ("S-", "TS-", "BURST-")


def filter_symbols(text: str) -> str:
    """Drop every character that is not in the alphabet.

    Matching is exact: lowercase letters are discarded, not folded.
    """
    return "".join(c for c in text if c in CHAR_TO_INDEX)


def build_codeword(valid_chars: str) -> tuple[int, ...]:
    """Place the symbol values of 17 alphabet characters into codeword order."""
    if len(valid_chars) != CODEWORD_LENGTH:
        raise ValueError(
            f"Codeword requires {CODEWORD_LENGTH} symbols, got {len(valid_chars)}")
    codeword = [0] * CODEWORD_LENGTH
    for index, char in enumerate(valid_chars):
        value = CHAR_TO_INDEX.get(char)
        if value is None:
            raise ValueError(f"Invalid character in address: {char!r}")
        codeword[CODEWORD_MAP[index]] = value
    return tuple(codeword)


def strip_prefix(text: str, prefixes=NETWORK_PREFIXES) -> str:
    """Remove one leading network prefix (case-insensitive), if present.

    Longer prefixes are tried first so "TS-" wins over "S-".
    """
    stripped = text.strip()
    upper = stripped.upper()
    for prefix in sorted(prefixes, key=len, reverse=True):
        if upper.startswith(prefix.upper()):
            return stripped[len(prefix):]
    return stripped
