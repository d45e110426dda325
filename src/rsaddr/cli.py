"""rsaddr — command line decoder for Reed-Solomon account addresses.

Usage:
    rsaddr decode <address...>      Decode to hex and decimal account ID
    rsaddr check <address...>       Report ok or the failure kind
    rsaddr syndromes <address>      Show codeword and checksum syndromes

Use '-' as the address to read addresses from stdin, one per line.

Environment:
    RSADDR_LOG_LEVEL    Logging level (default: WARNING)
    RSADDR_PREFIXES     Comma separated network prefixes (default: S-,TS-,BURST-)
"""

import argparse
import json
import logging
import os
import sys

from .address import AddressDecodeError, decode_account_id
from .core.alphabet import CODEWORD_LENGTH, NETWORK_PREFIXES, build_codeword, filter_symbols, strip_prefix
from .core.checksum import syndromes

logger = logging.getLogger("rsaddr")

DEFAULT_LOG_LEVEL = os.environ.get("RSADDR_LOG_LEVEL", "WARNING")
DEFAULT_PREFIXES = tuple(
    p.strip() for p in os.environ.get("RSADDR_PREFIXES", ",".join(NETWORK_PREFIXES)).split(",")
    if p.strip()
)


def setup_logging(verbose=False):
    """Attach a stream handler to the package logger (once)."""
    level_name = "DEBUG" if verbose else DEFAULT_LOG_LEVEL.upper()
    level = logging.getLevelName(level_name)
    # getLevelName returns "Level X" for unknown names
    logger.setLevel(level if isinstance(level, int) else logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
            datefmt="%H:%M:%S",
        ))
        logger.addHandler(handler)


def iter_addresses(values):
    """Yield (source_line, address) pairs numbered by one running counter.

    '-' expands to stdin lines; blank stdin lines are counted but skipped.
    """
    line_no = 0
    for value in values:
        if value != "-":
            line_no += 1
            yield line_no, value
            continue
        for line in sys.stdin:
            line_no += 1
            line = line.strip()
            if line:
                yield line_no, line


# ---- Commands ----

def cmd_decode(args):
    failures = 0
    for line_no, raw in iter_addresses(args.addresses):
        address = strip_prefix(raw, args.prefixes)
        try:
            account_id = decode_account_id(address, line_no)
        except AddressDecodeError as e:
            failures += 1
            if args.json:
                print(json.dumps({"address": raw, "error": e.kind.value, "message": str(e)}))
            else:
                print(f"ERROR: {e} ({e.kind.value})", file=sys.stderr)
            continue

        if args.json:
            print(json.dumps({"address": raw, "hex": f"{account_id:016x}",
                              "id": str(account_id)}))
        else:
            print(f"{raw}  {account_id:016x}  {account_id}")
    return 1 if failures else 0


def cmd_check(args):
    failures = 0
    for line_no, raw in iter_addresses(args.addresses):
        try:
            decode_account_id(strip_prefix(raw, args.prefixes), line_no)
        except AddressDecodeError as e:
            failures += 1
            print(f"{raw}  {e.kind.value}")
        else:
            print(f"{raw}  ok")
    return 1 if failures else 0


def cmd_syndromes(args):
    valid = filter_symbols(strip_prefix(args.address, args.prefixes))
    if len(valid) != CODEWORD_LENGTH:
        print(f"ERROR: expected {CODEWORD_LENGTH} address symbols, got {len(valid)}",
              file=sys.stderr)
        return 1
    codeword = build_codeword(valid)
    values = syndromes(codeword)
    print(f"Codeword:  {' '.join(f'{v:2d}' for v in codeword)}")
    print(f"Syndromes: {' '.join(str(s) for s in values)}")
    print(f"Valid:     {not any(values)}")
    return 0


# ---- CLI setup ----

def build_parser():
    parser = argparse.ArgumentParser(
        prog="rsaddr",
        description="Decode Reed-Solomon account addresses to 64-bit account IDs",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--prefix", action="append", dest="prefixes",
                        help="Network prefix to strip (repeatable, default: %s)"
                             % ",".join(DEFAULT_PREFIXES))

    sub = parser.add_subparsers(dest="command", required=True)

    # decode
    p_decode = sub.add_parser("decode", help="Decode addresses")
    p_decode.add_argument("addresses", nargs="+", help="Addresses (use '-' for stdin)")
    p_decode.add_argument("--json", action="store_true", help="Machine-readable JSON output")

    # check
    p_check = sub.add_parser("check", help="Validate addresses")
    p_check.add_argument("addresses", nargs="+", help="Addresses (use '-' for stdin)")

    # syndromes
    p_syn = sub.add_parser("syndromes", help="Show codeword and syndromes")
    p_syn.add_argument("address", help="Address to inspect")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if not args.prefixes:
        args.prefixes = DEFAULT_PREFIXES
    setup_logging(args.verbose)

    commands = {
        "decode": cmd_decode,
        "check": cmd_check,
        "syndromes": cmd_syndromes,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
