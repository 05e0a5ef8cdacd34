"""
Read and write QIF (Quicken Interchange Format) bank transaction files.
"""

from .controllers import QifReader, QifWriter
from .data_model import (
    SUPPORTED_ACCOUNT_TYPES,
    EnumClearedStatus,
    QifHeader,
    QSplit,
    QTransaction,
)
from .data_model.qif_parsers_emitters import (
    DEFAULT_DATE_FORMAT,
    SUPPORTED_DATE_FORMATS,
    DateFormat,
    TransactionCodec,
    guess_date_format,
)
from .errors import (
    MalformedRecordError,
    QifError,
    UnknownAccountTypeError,
    UnrecognizedDataError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "SUPPORTED_ACCOUNT_TYPES",
    "SUPPORTED_DATE_FORMATS",
    "DateFormat",
    "EnumClearedStatus",
    "MalformedRecordError",
    "QifError",
    "QifHeader",
    "QifReader",
    "QifWriter",
    "QSplit",
    "QTransaction",
    "TransactionCodec",
    "UnknownAccountTypeError",
    "UnrecognizedDataError",
    "guess_date_format",
]
