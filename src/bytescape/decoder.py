from typing import Dict, TypeAlias

from bytescape.constants import (
    BACKSLASH,
    BRACE_INTRODUCER,
    BRACE_MAX_DIGITS,
    CLOSE_BRACE,
    CONTROL_INTRODUCER,
    CONTROL_RANGE,
    EXTENDED_CONTROL_RANGE,
    MAX_BYTE,
    NUMERIC_ESCAPES,
    OCTAL_ESCAPE,
    OPEN_BRACE,
    SIMPLE_ESCAPES,
    UPPERCASE_ESCAPES,
)
from bytescape.error import (
    EscapeOutOfRangeError,
    InvalidCodepointError,
    InvalidEscapeError,
    TruncatedEscapeError,
)
from bytescape.helpers import digit_value, encode_utf8, is_scalar_value, to_upper
from bytescape.types import DecoderConfig, Emit, NumericEscape

BytesLike: TypeAlias = bytes | bytearray | memoryview


class ByteEscapeDecoder:
    r"""
    Decoder for byte strings with C-like / `$'...'` backslash escapes.

    Handles \a, \b, \e, \f, \n, \r, \t, \v, \\, \', \", octal (\0 - \377),
    hex bytes (\xHH), unicode (\uHHHH, \u{H..H}, \UHHHHHHHH) written as UTF-8,
    and control characters (\c@, \cA - \cZ, \c[, \c\, \c], \c^, \c_).

    Decoding is strict: the first bad escape raises a DecodeError carrying the
    offset of its backslash, and no partial output is returned.
    """

    def __init__(self, config: DecoderConfig | None = None) -> None:
        self._config = config if config is not None else DecoderConfig()
        self._escape_map: Dict[int, int] = dict(SIMPLE_ESCAPES)
        if self._config.uppercase_escape:
            self._escape_map.update(UPPERCASE_ESCAPES)

    @property
    def config(self) -> DecoderConfig:
        return self._config

    def decode(self, data: BytesLike) -> bytes:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"Expected a bytes-like object, got {type(data).__name__}"
            )
        data = bytes(data)
        out = bytearray()
        cursor = 0
        while cursor < len(data):
            start = data.find(BACKSLASH, cursor)
            if start < 0:
                out += data[cursor:]
                break
            out += data[cursor:start]
            cursor = self._decode_escape(data, start, out)
        return bytes(out)

    def _decode_escape(self, data: bytes, start: int, out: bytearray) -> int:
        """Decode the escape whose backslash is at `start`, return the next cursor."""
        if start + 1 >= len(data):
            raise TruncatedEscapeError(start, data[start:], "backslash at end of input")
        introducer = data[start + 1]

        simple = self._escape_map.get(introducer)
        if simple is not None:
            out.append(simple)
            return start + 2

        if introducer == CONTROL_INTRODUCER:
            return self._decode_control(data, start, out)

        if (
            introducer == BRACE_INTRODUCER
            and start + 2 < len(data)
            and data[start + 2] == OPEN_BRACE
        ):
            return self._decode_braced(data, start, out)

        numeric = NUMERIC_ESCAPES.get(introducer)
        if numeric is None and digit_value(introducer, OCTAL_ESCAPE.base) is not None:
            numeric = OCTAL_ESCAPE
        if numeric is not None:
            return self._decode_numeric(data, start, numeric, out)

        raise InvalidEscapeError(
            start, data[start : start + 2], "unknown escape character"
        )

    def _decode_numeric(
        self, data: bytes, start: int, escape: NumericEscape, out: bytearray
    ) -> int:
        digits_start = start + 1 if escape.introducer_is_digit else start + 2
        limit = min(len(data), digits_start + escape.max_digits)
        cursor = digits_start
        value = 0
        while cursor < limit:
            digit = digit_value(data[cursor], escape.base)
            if digit is None:
                break
            value = value * escape.base + digit
            cursor += 1

        if cursor - digits_start < escape.min_digits:
            # `\u` / `\U` at end of input; `\x` stays an invalid escape
            if escape.emit is Emit.CODEPOINT and digits_start >= len(data):
                raise TruncatedEscapeError(start, data[start:], "missing digits")
            raise InvalidEscapeError(start, data[start : cursor + 1], "no digits")
        self._emit(data, start, cursor, value, escape.emit, out)
        return cursor

    def _decode_braced(self, data: bytes, start: int, out: bytearray) -> int:
        digits_start = start + 3
        cursor = digits_start
        value = 0
        while True:
            if cursor >= len(data):
                raise TruncatedEscapeError(
                    start, data[start:], "missing closing brace"
                )
            byte = data[cursor]
            if byte == CLOSE_BRACE:
                break
            digit = digit_value(byte, 16)
            if digit is None:
                raise InvalidEscapeError(
                    start,
                    data[start : cursor + 1],
                    "expected hex digit or closing brace",
                )
            if cursor - digits_start == BRACE_MAX_DIGITS:
                raise InvalidEscapeError(
                    start,
                    data[start : cursor + 1],
                    f"more than {BRACE_MAX_DIGITS} hex digits",
                )
            value = value * 16 + digit
            cursor += 1

        end = cursor + 1
        if cursor == digits_start:
            raise InvalidEscapeError(start, data[start:end], "no digits")
        self._emit(data, start, end, value, Emit.CODEPOINT, out)
        return end

    def _decode_control(self, data: bytes, start: int, out: bytearray) -> int:
        if start + 2 >= len(data):
            raise TruncatedEscapeError(
                start, data[start:], "missing control character"
            )
        key = data[start + 2]
        upper = to_upper(key)
        if upper in CONTROL_RANGE:
            out.append(upper ^ 0x40)
        elif self._config.extended_control and key in EXTENDED_CONTROL_RANGE:
            out.append(key - 0x60)
        else:
            raise InvalidEscapeError(
                start, data[start : start + 3], "unknown control character"
            )
        return start + 3

    @staticmethod
    def _emit(
        data: bytes, start: int, end: int, value: int, emit: Emit, out: bytearray
    ) -> None:
        if emit is Emit.BYTE:
            if value > MAX_BYTE:
                raise EscapeOutOfRangeError(start, data[start:end], value, MAX_BYTE)
            out.append(value)
            return
        if not is_scalar_value(value):
            raise InvalidCodepointError(start, data[start:end], value)
        out += encode_utf8(value)


_default_decoder = ByteEscapeDecoder()


def decode(data: BytesLike, config: DecoderConfig | None = None) -> bytes:
    """Decode all backslash escapes in `data`. Raises DecodeError on bad input."""
    if config is None:
        return _default_decoder.decode(data)
    return ByteEscapeDecoder(config).decode(data)
