"""Orthographic special cases that sit between pinyin spelling and zhuyin glyphs."""

UMLAUT_INITIALS = ("j", "q", "x", "y")

# Initials whose "i" is an apical vowel with no zhuyin glyph.
EMPTY_RHYME_INITIALS = ("zh", "ch", "sh", "r", "z", "c", "s")

# Finals written with y in pinyin whose zhuyin glyph already carries the glide.
Y_WHOLE_SYLLABLE_FINALS = ("i", "v", "e", "ve", "in", "van", "ing", "vn")

# Pinyin y/w syllables whose zhuyin final is spelled differently.
_Y_FINALS_FOR_ZHUYIN = {"ong": "iong"}
_CONTRACTED_FINALS = {"iu": ("y", "ou"), "ui": ("w", "ei"), "un": ("w", "en")}


def to_umlaut_final(initial: str, final: str) -> str:
    """Reads a leading "u" after j, q, x or y as ü, spelled "v"."""
    if initial in UMLAUT_INITIALS and final.startswith("u"):
        return "v" + final[1:]
    return final


def to_plain_final(initial: str, final: str) -> str:
    """Drops the umlaut of a leading ü after j, q, x or y, as pinyin spelling does."""
    if initial in UMLAUT_INITIALS and final.startswith("v"):
        return "u" + final[1:]
    return final


def to_zhuyin_parts(initial: str, final: str) -> tuple[str, str]:
    """
    Rewrites pinyin parts into the parts that zhuyin actually writes.

    Either part may come back empty: "zhi" is written with ㄓ alone and
    "yu" with ㄩ alone.
    """
    final = to_umlaut_final(initial, final)
    if final == "i" and initial in EMPTY_RHYME_INITIALS + ("y",):
        return initial, ""
    if initial == "w" and final == "u":
        return "", final
    if initial == "y":
        if final in Y_WHOLE_SYLLABLE_FINALS:
            return "", final
        if final in _Y_FINALS_FOR_ZHUYIN:
            return "", _Y_FINALS_FOR_ZHUYIN[final]
    return initial, final


def to_pinyin_parts(initial: str, final: str) -> tuple[str, str] | None:
    """
    Rewrites the parts read from zhuyin glyphs into pinyin spelling.

    Returns None when the parts cannot form a syllable (a consonant with no
    final that does not take the empty rhyme).
    """
    if not final:
        if initial in EMPTY_RHYME_INITIALS:
            return initial, "i"
        return None
    if initial:
        return initial, final

    if final in Y_WHOLE_SYLLABLE_FINALS:
        return "y", final
    if final == "u":
        return "w", final
    # ㄨㄥ standing alone is pinyin "weng"; the reverse is never needed.
    if final == "ong":
        return "w", "eng"
    if final in _CONTRACTED_FINALS:
        return _CONTRACTED_FINALS[final]
    if final[0] == "i":
        return "y", final[1:]
    if final[0] == "u":
        return "w", final[1:]
    return initial, final
