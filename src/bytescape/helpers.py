from typing import Iterable

from bytescape.constants import MAX_CODEPOINT, SURROGATES

_DIGITS = b"0123456789abcdef"


def digit_value(byte: int, base: int) -> int | None:
    """Value of `byte` as an ASCII digit in `base` (8 or 16), or None."""
    if 0x41 <= byte <= 0x5A:
        byte |= 0x20
    index = _DIGITS.find(byte)
    if index < 0 or index >= base:
        return None
    return index


def to_upper(byte: int) -> int:
    if 0x61 <= byte <= 0x7A:
        return byte - 0x20
    return byte


def is_scalar_value(code_point: int) -> bool:
    if code_point < 0 or code_point > MAX_CODEPOINT:
        return False
    return code_point not in SURROGATES


def encode_utf8(code_point: int) -> bytes:
    if not is_scalar_value(code_point):
        raise ValueError(f"{code_point:#x} is not a Unicode scalar value")
    return chr(code_point).encode("utf-8")


def pretty_bytes(data: Iterable[int]) -> str:
    """Render bytes as space separated upper-case hex pairs, e.g. `0D 0A`."""
    return " ".join(f"{byte:02X}" for byte in data)


def pretty_string(data: bytes) -> str:
    """
    Best-effort presentable rendering of raw bytes.

    Invalid UTF-8 becomes U+FFFD, and C0 controls, space and DEL are shown
    using the Control Pictures block so they are visible in messages.
    DEL is deliberately shown as U+2421 (SYMBOL FOR DELETE) rather than
    U+247F, which other renderers of this kind have used by mistake.
    """
    text = bytes(data).decode("utf-8", errors="replace")
    pictures = []
    for ch in text:
        code_point = ord(ch)
        if code_point <= 0x20:
            pictures.append(chr(code_point + 0x2400))
        elif code_point == 0x7F:
            pictures.append("␡")
        else:
            pictures.append(ch)
    return "".join(pictures)
