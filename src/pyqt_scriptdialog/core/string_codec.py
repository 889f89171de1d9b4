"""
Inline string codec for the serialised dialog state format.

Serialised state is a flat ``name:value|name:value`` string, so both names and
values must never carry a raw ``|`` or ``:``. Reserved characters are written
as ``#XX`` (two uppercase hex digits):

- control characters (code points 0x00-0x1F)
- ``#`` (the escape character itself)
- ``,`` ``:`` ``|`` (delimiters used by the dialog and related formats)

Every other character passes through unchanged, including non-ASCII text.
"""

import logging
import string

logger = logging.getLogger(__name__)

ESCAPE_CHAR = "#"
RESERVED_CHARS = frozenset("#,:|")
HEX_DIGITS = frozenset(string.hexdigits)


def _needs_escape(char: str) -> bool:
    return ord(char) <= 0x1F or char in RESERVED_CHARS


def inline_string_encode(text: str) -> str:
    """
    Encode a string so it can be embedded in a delimited serialised entry.

    Args:
        text: Any string, including empty strings and control characters

    Returns:
        Encoded string containing no raw ``|``, ``:``, ``,`` or control characters

    Example:
        >>> inline_string_encode("a|b:c")
        'a#7Cb#3Ac'
    """
    return "".join(
        f"{ESCAPE_CHAR}{ord(char):02X}" if _needs_escape(char) else char
        for char in text
    )


def inline_string_decode(text: str) -> str:
    """
    Decode a string produced by :func:`inline_string_encode`.

    Malformed escapes (a ``#`` not followed by two hex digits) are kept
    literally instead of raising, so damaged archives still decode.

    Args:
        text: Encoded string

    Returns:
        The original string
    """
    output = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char == ESCAPE_CHAR:
            digits = text[i + 1:i + 3]
            if len(digits) == 2 and all(d in HEX_DIGITS for d in digits):
                output.append(chr(int(digits, 16)))
                i += 3
                continue
            logger.debug(f"Malformed escape at offset {i} in {text!r}; keeping literal '#'")
        output.append(char)
        i += 1
    return "".join(output)
