"""
Colour value type for colour-picker controls.

Colours arrive from scripts in several notations and are always reported back
as uppercase hex. Alpha follows the subtitle (ASS) convention: 0 is fully
opaque, 255 is fully transparent.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from PyQt6.QtGui import QColor

logger = logging.getLogger(__name__)

_ASS_PATTERN = re.compile(r"^&H([0-9A-Fa-f]{1,8})&?$", re.IGNORECASE)
_HTML_PATTERN = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")
_RGB_PATTERN = re.compile(r"^rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)$", re.IGNORECASE)


def _clamp_channel(value: int) -> int:
    return max(0, min(255, value))


@dataclass(frozen=True)
class DialogColor:
    """RGBA colour with ASS-style alpha (0 = opaque)."""
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def to_hex(self, include_alpha: bool = False) -> str:
        """
        Format as ``#RRGGBB`` or ``#RRGGBBAA``.

        Args:
            include_alpha: Append the alpha channel as a fourth byte

        Returns:
            str: Uppercase hex colour string (e.g., "#FF8000")
        """
        text = f"#{self.r:02X}{self.g:02X}{self.b:02X}"
        if include_alpha:
            text += f"{self.a:02X}"
        return text

    def to_qcolor(self) -> QColor:
        """Convert to a QColor for the rendering layer (Qt alpha is opacity)."""
        return QColor(self.r, self.g, self.b, 255 - self.a)

    @classmethod
    def from_qcolor(cls, color: QColor) -> "DialogColor":
        """Build from a QColor picked in the rendering layer."""
        return cls(color.red(), color.green(), color.blue(), 255 - color.alpha())


def parse_color(text: str) -> Optional[DialogColor]:
    """
    Parse a colour from any notation a script may supply.

    Supported notations:
    - ``#RGB``, ``#RRGGBB``, ``#RRGGBBAA``
    - ``&HBBGGRR&`` and ``&HAABBGGRR&`` (subtitle override-tag form)
    - ``rgb(r, g, b)``
    - colour names understood by QColor (``"red"``, ``"steelblue"``)

    Args:
        text: Colour text

    Returns:
        The parsed colour, or None when the text is not a colour
    """
    text = text.strip()
    if not text:
        return None

    match = _HTML_PATTERN.match(text)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(d * 2 for d in digits)
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        return DialogColor(*channels)

    match = _ASS_PATTERN.match(text)
    if match:
        value = int(match.group(1), 16)
        return DialogColor(
            r=value & 0xFF,
            g=(value >> 8) & 0xFF,
            b=(value >> 16) & 0xFF,
            a=(value >> 24) & 0xFF,
        )

    match = _RGB_PATTERN.match(text)
    if match:
        r, g, b = (_clamp_channel(int(part)) for part in match.groups())
        return DialogColor(r, g, b)

    qcolor = QColor(text)
    if qcolor.isValid():
        return DialogColor.from_qcolor(qcolor)

    logger.debug(f"Could not parse colour from {text!r}")
    return None
