"""Decode Reed-Solomon account addresses to 64-bit account identifiers.

Pipeline: filter -> length check -> codeword -> checksum -> base-32
accumulation -> 64-bit range check -> 16-digit hex.

The address text is passed without its network prefix ("S-", "BURST-");
see core.alphabet.strip_prefix.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .core.alphabet import BASE, CODEWORD_LENGTH, DATA_LENGTH, build_codeword, filter_symbols
from .core.checksum import is_codeword_valid

logger = logging.getLogger(__name__)

ACCOUNT_ID_LIMIT = 1 << 64


class DecodeErrorKind(Enum):
    TOO_SHORT = "too_short"
    MALFORMED = "malformed"
    CHECKSUM_INVALID = "checksum_invalid"
    OVERFLOW = "overflow"


class AddressDecodeError(ValueError):
    """Raised when an address cannot be decoded.

    Carries the failure kind, the caller's source line and the original
    (unfiltered) address text.
    """

    def __init__(self, kind: DecodeErrorKind, address: str, source_line: int):
        self.kind = kind
        self.address = address
        self.source_line = source_line
        super().__init__(f"At line: {source_line}. Error decoding address: S-{address}")


@dataclass(frozen=True)
class DecodeResult:
    value: str | None = None
    error: AddressDecodeError | None = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("DecodeResult requires exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None


def _fail(kind, address, source_line):
    logger.debug("rejected address %r at line %s: %s", address, source_line, kind.value)
    return AddressDecodeError(kind, address, source_line)


def decode_account_id(text: str, source_line: int) -> int:
    """Decode an address to its unsigned 64-bit account identifier."""
    valid_chars = filter_symbols(text)
    if len(valid_chars) < CODEWORD_LENGTH:
        raise _fail(DecodeErrorKind.TOO_SHORT, text, source_line)
    if len(valid_chars) > CODEWORD_LENGTH:
        raise _fail(DecodeErrorKind.MALFORMED, text, source_line)

    codeword = build_codeword(valid_chars)
    if not is_codeword_valid(codeword):
        raise _fail(DecodeErrorKind.CHECKSUM_INVALID, text, source_line)

    # Parity symbols (slots 13-16) carry no identifier bits
    account_id = 0
    for k in range(DATA_LENGTH):
        account_id += codeword[k] * BASE ** k

    if account_id >= ACCOUNT_ID_LIMIT:
        raise _fail(DecodeErrorKind.OVERFLOW, text, source_line)
    return account_id


def decode_address(text: str, source_line: int) -> str:
    """Decode an address to its identifier as 16 lowercase hex digits.

    Digits are most significant first, zero padded.
    """
    return f"{decode_account_id(text, source_line):016x}"


def try_decode_address(text: str, source_line: int) -> DecodeResult:
    """Like decode_address, but return the failure instead of raising it."""
    try:
        return DecodeResult(value=decode_address(text, source_line))
    except AddressDecodeError as e:
        return DecodeResult(error=e)
