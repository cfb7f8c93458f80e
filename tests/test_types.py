import pytest
from pydantic import ValidationError

from bytescape.constants import NUMERIC_ESCAPES, OCTAL_ESCAPE
from bytescape.types import DecoderConfig, Emit, NumericEscape


def test_decoder_config__defaults():
    config = DecoderConfig()
    assert config.uppercase_escape is False
    assert config.extended_control is False


def test_decoder_config__is_frozen():
    config = DecoderConfig()
    with pytest.raises(ValidationError):
        config.uppercase_escape = True


def test_decoder_config__rejects_unknown_option():
    with pytest.raises(ValidationError):
        DecoderConfig(ignore_errors=True)


def test_decoder_config__equality():
    assert DecoderConfig(extended_control=True) == DecoderConfig(extended_control=True)
    assert DecoderConfig(extended_control=True) != DecoderConfig()


@pytest.mark.parametrize(
    "introducer,base,max_digits,emit",
    [
        (ord("x"), 16, 2, Emit.BYTE),
        (ord("u"), 16, 4, Emit.CODEPOINT),
        (ord("U"), 16, 8, Emit.CODEPOINT),
    ],
)
def test_numeric_escapes_table(introducer: int, base: int, max_digits: int, emit: Emit):
    escape = NUMERIC_ESCAPES[introducer]
    assert escape.base == base
    assert escape.max_digits == max_digits
    assert escape.min_digits == 1
    assert escape.emit == emit
    assert escape.introducer_is_digit is False


def test_octal_escape_descriptor():
    assert OCTAL_ESCAPE.base == 8
    assert OCTAL_ESCAPE.max_digits == 3
    assert OCTAL_ESCAPE.emit == Emit.BYTE
    assert OCTAL_ESCAPE.introducer_is_digit is True


def test_numeric_escape__validates_fields():
    with pytest.raises(ValidationError):
        NumericEscape(introducer=0x100, base=16, min_digits=1, max_digits=2, emit=Emit.BYTE)
    with pytest.raises(ValidationError):
        NumericEscape(introducer=0x78, base=16, min_digits=1, max_digits=0, emit=Emit.BYTE)
