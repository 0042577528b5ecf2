"""DMS Tools - value utilities for a digital media server.

This package provides small, self-contained building blocks consumed by the
media server:

Key modules:
- core: Bit rate modes, expirable values, sequence combining, config
- commands: CLI command implementations
"""

__version__ = "0.1.0"
__author__ = "DMS Team"

# Re-export commonly used types
from dms_tools.core.expirable import BasicExpirable, Expirable
from dms_tools.core.sequences import SequenceCombiner
from dms_tools.core.types import BitRateMode

__all__ = [
    "__version__",
    "__author__",
    "BitRateMode",
    "Expirable",
    "BasicExpirable",
    "SequenceCombiner",
]
