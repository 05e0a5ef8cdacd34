# qif_stream/data_model/qif_parsers_emitters/__init__.py
from .date_format import (
    DEFAULT_DATE_FORMAT,
    SUPPORTED_DATE_FORMATS,
    DateFormat,
    as_date_format,
    guess_date_format,
    guess_stream_date_format,
)
from .header_parser import parse_header
from .line_reader import LineReader
from .record_tokenizer import RecordTokenizer
from .transaction_codec import TransactionCodec, parse_record_text

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "SUPPORTED_DATE_FORMATS",
    "DateFormat",
    "LineReader",
    "RecordTokenizer",
    "TransactionCodec",
    "as_date_format",
    "guess_date_format",
    "guess_stream_date_format",
    "parse_header",
    "parse_record_text",
]
