"""
Core value helpers.

String codec for the serialised state format and the colour value type.
No dependency on the dialog model.
"""

from .string_codec import inline_string_encode, inline_string_decode
from .color import DialogColor, parse_color

__all__ = [
    "inline_string_encode",
    "inline_string_decode",
    "DialogColor",
    "parse_color",
]
