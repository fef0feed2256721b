import pytest

from syllable_table import (
    FINALS,
    INITIALS,
    ZHUYIN_FINALS,
    final_for_glyph,
    initial_for_glyph,
    lookup_final,
    lookup_initial,
)


def test_lookup():
    assert lookup_initial("zh") == "ㄓ"
    assert lookup_final("iang") == "ㄧㄤ"
    assert initial_for_glyph("ㄓ") == "zh"
    assert final_for_glyph("ㄧㄤ") == "iang"


def test_lookup_misses():
    assert lookup_initial("") is None
    assert lookup_initial("zz") is None
    assert lookup_final("ê") is None
    assert lookup_final("r") is None
    assert final_for_glyph("ㄓ") is None
    assert final_for_glyph("ㄥㄥ") is None


def test_semivowels_decode_as_finals():
    assert lookup_initial("y") == "ㄧ"
    assert lookup_initial("w") == "ㄨ"
    assert initial_for_glyph("ㄧ") is None
    assert initial_for_glyph("ㄨ") is None
    assert final_for_glyph("ㄧ") == "i"
    assert final_for_glyph("ㄨ") == "u"


def test_canonical_finals():
    assert final_for_glyph("ㄩㄝ") == "ve"
    assert final_for_glyph("ㄝ") == "e"
    for glyphs, spelling in ZHUYIN_FINALS.items():
        if glyphs != "ㄝ":
            assert FINALS[spelling] == glyphs


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        INITIALS["v"] = "ㄪ"
    with pytest.raises(TypeError):
        FINALS["ê"] = "ㄝ"
