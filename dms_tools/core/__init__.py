"""Core functionality for dms_tools.

This module provides the value utilities shared across the media server:
- Bit rate mode type
- Expiration tracking
- Sequence combining
- Configuration management
- Utility functions
"""

from dms_tools.core.expirable import BasicExpirable, Expirable, ExpiringValue
from dms_tools.core.sequences import SequenceCombiner
from dms_tools.core.types import DEFAULT_BIT_RATE_MODE, BitRateMode
from dms_tools.core.utils import (
    current_time_millis,
    format_datetime,
    format_datetime_auto,
)

__all__ = [
    # Types
    "BitRateMode",
    "DEFAULT_BIT_RATE_MODE",
    # Expiration
    "Expirable",
    "BasicExpirable",
    "ExpiringValue",
    # Sequences
    "SequenceCombiner",
    # Utils
    "current_time_millis",
    "format_datetime",
    "format_datetime_auto",
]
