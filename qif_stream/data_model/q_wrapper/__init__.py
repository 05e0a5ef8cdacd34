# qif_stream/data_model/q_wrapper/__init__.py

from . import qif_codes
from .q_split import QSplit
from .q_transaction import QTransaction
from .qif_code import QifCode
from .qif_header import (
    DEFAULT_ACCOUNT_TYPE,
    SUPPORTED_ACCOUNT_TYPES,
    QifHeader,
    is_supported_header,
)
from .qif_record import QifRecord

__all__ = [
    "DEFAULT_ACCOUNT_TYPE",
    "SUPPORTED_ACCOUNT_TYPES",
    "QifCode",
    "QifHeader",
    "QifRecord",
    "QSplit",
    "QTransaction",
    "is_supported_header",
    "qif_codes",
]
