"""Text sanitization for console input.

Every line read from the interactive player passes through sanitize_text
before it reaches the move parser.
"""

import re

# Control chars to strip (keep \t=0x09, \n=0x0a, \r=0x0d; trimmed anyway)
_CONTROL_RE = re.compile(
    r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]"
)

# Zero-width and BOM characters
_ZERO_WIDTH_RE = re.compile(
    r"[\u200b\u200c\u200d\u2060\ufeff\u00ad]"
)


def sanitize_text(text: str) -> str:
    """Strip control chars, zero-width chars and surrounding whitespace."""
    text = _CONTROL_RE.sub("", text)
    text = _ZERO_WIDTH_RE.sub("", text)
    return text.strip()
