import pytest

from tones import tone_final, untone_final, zhuyin_tone, zhuyin_tone_mark


@pytest.mark.parametrize(
    "final, tone, expected",
    [
        ("a", 1, "ā"),
        ("uan", 4, "uàn"),
        ("iao", 3, "iǎo"),
        ("ou", 2, "óu"),
        ("ei", 4, "èi"),
        ("iu", 2, "iú"),
        ("ui", 3, "uǐ"),
        ("ie", 1, "iē"),
        ("ing", 2, "íng"),
        ("v", 3, "ǚ"),
        ("ve", 4, "üè"),
        ("van", 2, "üán"),
        ("in", 5, "in"),
        ("ve", 5, "üe"),
    ],
)
def test_tone_final(final, tone, expected):
    assert tone_final(final, tone) == expected


def test_untone_final():
    assert untone_final("uàn") == ("uan", 4)
    assert untone_final("ǚ") == ("v", 3)
    assert untone_final("üe") == ("ve", 5)
    assert untone_final("ang") == ("ang", 5)
    assert untone_final("āā") is None
    assert untone_final("ǎó") is None


def test_zhuyin_tones():
    assert zhuyin_tone_mark(1) == ""
    assert [zhuyin_tone_mark(t) for t in range(2, 6)] == ["ˊ", "ˇ", "ˋ", "˙"]
    assert zhuyin_tone("ˇ") == 3
    assert zhuyin_tone("˙") == 5
    assert zhuyin_tone("") is None
    assert zhuyin_tone("ㄚ") is None
