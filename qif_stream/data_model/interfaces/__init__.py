"""
Interfaces and Enums for the QIF data model.
"""

from .enum_cleared_status import EnumClearedStatus
from .i_split import ISplit
from .i_to_dict import IToDict, RecursiveDictStr
from .i_transaction import ITransaction

__all__ = [
    "EnumClearedStatus",
    "ISplit",
    "IToDict",
    "ITransaction",
    "RecursiveDictStr",
]
