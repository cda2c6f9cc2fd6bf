"""Grammar limits and marker characters shared across the parser."""
from __future__ import annotations

LOCAL_PART_MAX_LENGTH = 64
DOMAIN_MAX_LENGTH = 255
SUB_DOMAIN_MAX_LENGTH = 63

AT_SYMBOL = "@"
DOT = "."
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"
DISPLAY_START = "<"
DISPLAY_SEPARATOR = " <"
DISPLAY_END = ">"
LEFT_BRACKET = "["
RIGHT_BRACKET = "]"
LEFT_PARENTHESIS = "("
RIGHT_PARENTHESIS = ")"
SPACE = " "
HORIZONTAL_TAB = "\t"

MAILTO_URI_PREFIX = "mailto:"
