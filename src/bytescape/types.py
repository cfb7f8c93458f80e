from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(Enum):
    TRUNCATED_ESCAPE = "truncated_escape"
    INVALID_ESCAPE = "invalid_escape"
    ESCAPE_OUT_OF_RANGE = "escape_out_of_range"
    INVALID_CODEPOINT = "invalid_codepoint"


class Emit(Enum):
    # a single raw byte, value must fit in 0..255
    BYTE = "byte"
    # a Unicode scalar value, written out as UTF-8
    CODEPOINT = "codepoint"


class NumericEscape(BaseModel):
    """
    Describes a greedy numeric escape family such as `\\x41` or `\\101`.

    Digits are scanned after the introducer until a byte that is not a digit
    of `base` is seen or `max_digits` have been read.
    """

    model_config = ConfigDict(frozen=True)

    introducer: int = Field(ge=0, le=0xFF)
    base: int
    min_digits: int = Field(ge=0)
    max_digits: int = Field(ge=1)
    emit: Emit
    # the introducer itself is the first digit (octal escapes)
    introducer_is_digit: bool = False


class DecoderConfig(BaseModel):
    """
    Optional extensions on top of the default escape table.

    uppercase_escape: accept `\\E` as an alias of `\\e`.
    extended_control: accept the lower-case control range
        (a backtick, `{`, `|`, `}` or `~` after `\\c`).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    uppercase_escape: bool = False
    extended_control: bool = False
