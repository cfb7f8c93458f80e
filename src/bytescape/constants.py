from typing import Dict

from bytescape.types import Emit, NumericEscape

BACKSLASH = 0x5C

SIMPLE_ESCAPES: Dict[int, int] = {
    ord("a"): 0x07,  # alert / bell
    ord("b"): 0x08,  # backspace
    ord("e"): 0x1B,  # escape
    ord("f"): 0x0C,  # form feed
    ord("n"): 0x0A,  # line feed
    ord("r"): 0x0D,  # carriage return
    ord("t"): 0x09,  # horizontal tab
    ord("v"): 0x0B,  # vertical tab
    ord("\\"): 0x5C,
    ord("'"): 0x27,
    ord('"'): 0x22,
}

UPPERCASE_ESCAPES: Dict[int, int] = {
    ord("E"): 0x1B,
}

NUMERIC_ESCAPES: Dict[int, NumericEscape] = {
    escape.introducer: escape
    for escape in [
        NumericEscape(
            introducer=ord("x"), base=16, min_digits=1, max_digits=2, emit=Emit.BYTE
        ),
        NumericEscape(
            introducer=ord("u"),
            base=16,
            min_digits=1,
            max_digits=4,
            emit=Emit.CODEPOINT,
        ),
        NumericEscape(
            introducer=ord("U"),
            base=16,
            min_digits=1,
            max_digits=8,
            emit=Emit.CODEPOINT,
        ),
    ]
}

OCTAL_ESCAPE = NumericEscape(
    introducer=ord("0"),
    base=8,
    min_digits=1,
    max_digits=3,
    emit=Emit.BYTE,
    introducer_is_digit=True,
)

CONTROL_INTRODUCER = ord("c")
BRACE_INTRODUCER = ord("u")
OPEN_BRACE = ord("{")
CLOSE_BRACE = ord("}")
BRACE_MAX_DIGITS = 6

# `\c@` .. `\c_` after upper-casing
CONTROL_RANGE = range(0x40, 0x60)
# `\c`` .. `\c~`, only with DecoderConfig.extended_control
EXTENDED_CONTROL_RANGE = range(0x60, 0x7F)

MAX_BYTE = 0xFF
MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)
