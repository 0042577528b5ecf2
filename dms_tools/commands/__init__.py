"""CLI command implementations for dms_tools.

This module contains all command-line interface implementations:
- bitrate: Parse bit rate mode labels
- expires: Inspect expiration timestamps
- combine: Combine lists into a single sequence
"""

from dms_tools.commands.bitrate import bitrate
from dms_tools.commands.combine import combine
from dms_tools.commands.expires import expires

__all__ = ["bitrate", "combine", "expires"]
