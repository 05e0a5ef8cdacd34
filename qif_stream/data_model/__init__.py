# qif_stream/data_model/__init__.py
from .interfaces import EnumClearedStatus, ISplit, IToDict, ITransaction
from .q_wrapper import (
    DEFAULT_ACCOUNT_TYPE,
    SUPPORTED_ACCOUNT_TYPES,
    QifCode,
    QifHeader,
    QifRecord,
    QSplit,
    QTransaction,
    qif_codes,
)

__all__ = [
    "DEFAULT_ACCOUNT_TYPE",
    "SUPPORTED_ACCOUNT_TYPES",
    "EnumClearedStatus",
    "ISplit",
    "IToDict",
    "ITransaction",
    "QifCode",
    "QifHeader",
    "QifRecord",
    "QSplit",
    "QTransaction",
    "qif_codes",
]
