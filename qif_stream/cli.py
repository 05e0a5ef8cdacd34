#!/usr/bin/env python3
"""
Command line front end.

Commands:
- info:    account type, date format, options and transaction count
- convert: re-emit a file under another date format and/or account label
- dump:    one JSON object per transaction
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from qif_stream.controllers import QifReader, QifWriter
from qif_stream.data_model.qif_parsers_emitters import DateFormat
from qif_stream.errors import QifError
from qif_stream.utilities import configure_logging

log = logging.getLogger(__name__)


def _check_input(path: Path) -> None:
    if not path.exists():
        raise SystemExit(f"Input QIF not found: {path}")
    if not path.is_file():
        raise SystemExit(f"Input path is not a file: {path}")


def _cmd_info(args: argparse.Namespace) -> None:
    with QifReader.open(
        args.input, args.date_format, strict=args.strict, encoding=args.encoding
    ) as reader:
        print(f"Account type: {reader.account_type}")
        print(f"Date format:  {reader.date_format}")
        if reader.options:
            print(f"Options:      {':'.join(reader.options)}")
        print(f"Transactions: {reader.count()}")


def _cmd_convert(args: argparse.Namespace) -> None:
    with QifReader.open(
        args.input, args.date_format, strict=args.strict, encoding=args.encoding
    ) as reader:
        transactions = reader.transactions()
        account_type = args.account_type or reader.account_type
        date_format = args.output_date_format or reader.date_format
    with QifWriter.open(args.output, account_type, date_format) as writer:
        writer.extend(transactions)
    log.info("Wrote %d transactions to %s", len(transactions), args.output)


def _cmd_dump(args: argparse.Namespace) -> None:
    with QifReader.open(
        args.input, args.date_format, strict=args.strict, encoding=args.encoding
    ) as reader:
        for txn in reader:
            print(json.dumps(txn.to_dict(), ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="qif-stream", description="Read, inspect and rewrite QIF bank files."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="Console log level (default: WARNING)")
    ap.add_argument("--log-file", type=Path, help="Also write a rotating debug log here")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("input", type=Path, help="Path to input .qif file")
    common.add_argument("--date-format", type=DateFormat,
                        help="Date layout of the input, e.g. dd/mm/yyyy (default: guessed)")
    common.add_argument("--encoding", default="utf-8",
                        help="Text encoding of input QIF (default: utf-8). Try cp1252 for old exports.")
    common.add_argument("--strict", action="store_true",
                        help="Fail on malformed records instead of skipping them")

    sub = ap.add_subparsers(dest="command", required=True)

    p_info = sub.add_parser("info", parents=[common], help="Summarize a QIF file")
    p_info.set_defaults(func=_cmd_info)

    p_convert = sub.add_parser("convert", parents=[common], help="Rewrite a QIF file")
    p_convert.add_argument("output", type=Path, help="Path to output .qif file")
    p_convert.add_argument("--output-date-format", type=DateFormat,
                           help="Date layout of the output (default: same as input)")
    p_convert.add_argument("--account-type",
                           help="Account type label of the output (default: same as input)")
    p_convert.set_defaults(func=_cmd_convert)

    p_dump = sub.add_parser("dump", parents=[common], help="Print transactions as JSON lines")
    p_dump.set_defaults(func=_cmd_dump)
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    _check_input(args.input)
    try:
        args.func(args)
    except QifError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
