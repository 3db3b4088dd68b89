import pytest

from marsarcade.font import FONT_5X7, GLYPH_COUNT, GLYPH_WIDTH, glyph


def test_font_table_size():
    glyphs = [glyph(chr(code)) for code in range(32, 32 + GLYPH_COUNT)]
    assert len(glyphs) == 96
    assert sum(len(columns) for columns in glyphs) == 480
    assert len(FONT_5X7) == 480


def test_space_is_blank():
    assert glyph(" ") == bytes(5)


def test_letter_a_columns():
    assert glyph("A") == bytes((0x7E, 0x11, 0x11, 0x11, 0x7E))


def test_digit_one_columns():
    assert glyph("1") == bytes((0x00, 0x42, 0x7F, 0x40, 0x00))


def test_every_printable_glyph_fits_seven_rows():
    for code in range(32, 128):
        columns = glyph(chr(code))
        assert len(columns) == GLYPH_WIDTH
        assert all(col < 0x80 for col in columns)


def test_glyphs_are_consecutive_slices():
    joined = b"".join(glyph(chr(code)) for code in range(32, 128))
    assert joined == FONT_5X7


@pytest.mark.parametrize("bad", ["", "ab", "\x1f", "\x80", "é"])
def test_unsupported_input_rejected(bad):
    with pytest.raises(ValueError):
        glyph(bad)