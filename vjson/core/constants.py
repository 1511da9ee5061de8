"""
Common constants used across the vjson library.
"""

OBJECT_START = "{"
OBJECT_END = "}"
QUOTE = '"'
COLON = ":"
COMMA = ","
BACKSLASH = "\\"

# Whitespace recognised between tokens
WHITESPACE = frozenset(" \t\n\r")

# Skipped between pairs; commas carry no structure of their own
SEPARATORS = WHITESPACE | {COMMA}

# A bare value runs until one of these
BARE_VALUE_TERMINATORS = frozenset({COMMA, OBJECT_END})

# Character class for the emitter's numeric test
NUMERIC_CHARS = frozenset("0123456789-.")

KEYWORD_LITERALS = frozenset({"true", "false", "null"})

TRUE_TEXT = "true"
FALSE_TEXT = "false"

# Trimmed from the input and from bare values, alongside Unicode whitespace
BYTE_ORDER_MARK = "\ufeff"
