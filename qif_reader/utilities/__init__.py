from .config_logging import LOGGING
from .converters_scalar import clean_amount_string, is_null_or_whitespace, to_decimal
from .core_util import open_for_read

__all__ = [
    "is_null_or_whitespace",
    "to_decimal",
    "clean_amount_string",
    "open_for_read",
    "LOGGING",
]
