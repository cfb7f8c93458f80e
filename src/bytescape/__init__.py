from bytescape.decoder import ByteEscapeDecoder, decode
from bytescape.error import (
    DecodeError,
    EscapeOutOfRangeError,
    InvalidCodepointError,
    InvalidEscapeError,
    TruncatedEscapeError,
)
from bytescape.helpers import pretty_bytes, pretty_string
from bytescape.types import DecoderConfig, ErrorKind

__all__ = [
    "ByteEscapeDecoder",
    "DecodeError",
    "DecoderConfig",
    "ErrorKind",
    "EscapeOutOfRangeError",
    "InvalidCodepointError",
    "InvalidEscapeError",
    "TruncatedEscapeError",
    "decode",
    "pretty_bytes",
    "pretty_string",
]
