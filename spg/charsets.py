"""
spg.charsets
Character classes appended by the mini-language directives.
"""

LOWER = "abcdefghijklmnopqrstuvwxyz"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "1234567890"
PUNCTUATION = "!@#$%^&*,.;:/?+="
HYPHEN = "-"
UNDERSCORE = "_"
# backtick appears twice
BRACKETS = "()[]{}<>|'\"`~`"

# directive -> characters appended to the pool
CLASSES = {
    "a": LOWER,
    "A": UPPER,
    "0": DIGITS,
    ".": PUNCTUATION,
    "-": HYPHEN,
    "_": UNDERSCORE,
    "[": BRACKETS,
    "]": BRACKETS,
}

UNSAFE = "u"
SAFE = "s"
ESCAPE = "c"
