from .qif_reader import QifReader
from .qif_writer import QifWriter

__all__ = ["QifReader", "QifWriter"]
