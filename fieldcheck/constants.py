"""Process-wide validation thresholds and patterns."""

from __future__ import annotations

import re
from types import MappingProxyType

# Assumes a varchar(128) db column
MAX_SHORT_TEXT_LENGTH = 128

# Assumes potential double-encoding in a text db column
MAX_TEXTAREA_LENGTH = 20000

EMAIL_REGEX = re.compile(
    r"^([a-zA-Z0-9_\-\.\+])+@(([a-zA-Z0-9\-])+\.)+([a-zA-Z0-9]{2,5})",
    re.IGNORECASE,
)

URL_REGEX = re.compile(
    r"(([a-z]+://)?"
    r"(([a-z0-9\-]+\.)+([a-z]{2,}|aero|arpa|biz|com|coop|edu|gov|info|int|jobs|mil|museum|name|nato|net|org|pro"
    r"|travel|local|internal))"
    r"(:[0-9]{1,5})?"
    r"(\?[a-z0-9+_\-\.%=&amp;]*)?"
    r"(/[a-z0-9_\-\.~%\?\&\=]+)*"
    r"(/([a-z0-9_\-\.]*)(\?[a-z0-9+_\-\.%=&amp;]*)?)?"
    r"(#[a-zA-Z0-9!$&'()*+.=-_~:@/?]*)?)",
    re.IGNORECASE,
)

# Plain ASCII decimal with optional sign and exponent, surrounding whitespace allowed
NUMERIC_REGEX = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)

CONSTANTS = MappingProxyType(
    {
        "MAX_SHORT_TEXT_LENGTH": MAX_SHORT_TEXT_LENGTH,
        "MAX_TEXTAREA_LENGTH": MAX_TEXTAREA_LENGTH,
        "EMAIL_REGEX": EMAIL_REGEX,
        "URL_REGEX": URL_REGEX,
    }
)
