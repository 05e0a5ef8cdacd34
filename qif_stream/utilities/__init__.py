from .config_logging import LOGGING, build_logging_config, configure_logging
from .converters_scalar import normalize_amount, to_decimal
from .core_util import is_null_or_whitespace, open_for_read, open_for_write

__all__ = [
    "LOGGING",
    "build_logging_config",
    "configure_logging",
    "is_null_or_whitespace",
    "normalize_amount",
    "open_for_read",
    "open_for_write",
    "to_decimal",
]
