"""Core type definitions for dms_tools."""

from __future__ import annotations

from enum import Enum

import structlog

logger = structlog.get_logger()


class BitRateMode(Enum):
    """Encoding bit rate modes."""
    CBR = "Constant"
    VBR = "Variable"

    def display_name(self) -> str:
        """Human readable name of the mode."""
        return self.value

    def __str__(self) -> str:
        return self.display_name()

    @classmethod
    def parse(cls, value: str | None) -> BitRateMode | None:
        """Parse a bit rate mode label.

        Accepts the short codes (``CBR``, ``VBR``) and the display names
        (``Constant``, ``Variable``), ignoring case and surrounding
        whitespace.

        Args:
            value: Label to parse

        Returns:
            The matching mode, or None if the label is blank or unknown

        Example:
            >>> BitRateMode.parse(" vbr ")
            <BitRateMode.VBR: 'Variable'>
            >>> BitRateMode.parse("XBR") is None
            True
        """
        if value is None or not value.strip():
            return None

        # str.upper() does not depend on the process locale
        label = value.strip().upper()
        mode = _BIT_RATE_MODE_LABELS.get(label)
        if mode is None:
            logger.debug("bit_rate_mode_unrecognized", value=value)
        return mode


_BIT_RATE_MODE_LABELS = {
    "CBR": BitRateMode.CBR,
    "CONSTANT": BitRateMode.CBR,
    "VBR": BitRateMode.VBR,
    "VARIABLE": BitRateMode.VBR,
}

DEFAULT_BIT_RATE_MODE = BitRateMode.CBR
