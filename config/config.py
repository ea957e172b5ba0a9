"""Configuration - tokenizer, display and logging settings"""
import logging

import numpy as np

logger = logging.getLogger(__name__)

# Tokenizer
TOKENIZER_CONFIG = {
    "strict": False,  # True: raise on unrecognized characters instead of skipping them
    "number_dtype": None,  # None = arbitrary precision; or "uint8"/"uint16"/"uint32"/"uint64"
}

# Diagnostics
DISPLAY_CONFIG = {
    "separator": ", ",
}

LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

UNSIGNED_DTYPES = ("uint8", "uint16", "uint32", "uint64")


def number_limit(number_dtype):
    """Largest Number value allowed by a dtype name, None when unbounded"""
    if number_dtype is None:
        return None
    if number_dtype not in UNSIGNED_DTYPES:
        raise ValueError(f"number_dtype must be one of {UNSIGNED_DTYPES} or None, got {number_dtype!r}")
    return int(np.iinfo(np.dtype(number_dtype)).max)


def validate_config():
    """Check the configuration values are consistent"""
    assert isinstance(TOKENIZER_CONFIG["strict"], bool), "strict must be a bool"
    assert TOKENIZER_CONFIG["number_dtype"] is None or TOKENIZER_CONFIG["number_dtype"] in UNSIGNED_DTYPES, \
        "number_dtype must be None or an unsigned integer dtype"
    assert isinstance(DISPLAY_CONFIG["separator"], str), "separator must be a string"
    assert LOGGING_CONFIG["level"] in logging.getLevelNamesMapping(), "unknown log level"
    logger.debug("Configuration validated successfully!")
