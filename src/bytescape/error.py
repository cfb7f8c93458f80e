from bytescape.helpers import pretty_bytes, pretty_string
from bytescape.types import ErrorKind


class DecodeError(ValueError):
    kind: ErrorKind
    description = "Invalid escape sequence"

    def __init__(self, offset: int, escape: bytes, detail: str | None = None) -> None:
        self.offset = offset
        self.escape = bytes(escape)
        self.escape_hex = pretty_bytes(self.escape)
        self.escape_text = pretty_string(self.escape)
        self.detail = detail
        super().__init__(
            f"{self.description} at offset {offset}: '{self.escape_text}' [{self.escape_hex}]"
            + (f": {detail}" if detail else "")
        )


class TruncatedEscapeError(DecodeError):
    kind = ErrorKind.TRUNCATED_ESCAPE
    description = "Input ends inside escape sequence"


class InvalidEscapeError(DecodeError):
    kind = ErrorKind.INVALID_ESCAPE
    description = "Invalid escape sequence"


class EscapeOutOfRangeError(DecodeError):
    kind = ErrorKind.ESCAPE_OUT_OF_RANGE
    description = "Escape value out of range"

    def __init__(self, offset: int, escape: bytes, value: int, maximum: int) -> None:
        super().__init__(offset, escape, f"{value} exceeds {maximum}")
        self.value = value


class InvalidCodepointError(DecodeError):
    kind = ErrorKind.INVALID_CODEPOINT
    description = "Escape is not a Unicode scalar value"

    def __init__(self, offset: int, escape: bytes, code_point: int) -> None:
        super().__init__(offset, escape, f"U+{code_point:04X}")
        self.code_point = code_point
