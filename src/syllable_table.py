from types import MappingProxyType

# fmt: off
INITIALS = MappingProxyType({
    "b": "ㄅ", "p": "ㄆ", "m": "ㄇ", "f": "ㄈ",
    "d": "ㄉ", "t": "ㄊ", "n": "ㄋ", "l": "ㄌ",
    "g": "ㄍ", "k": "ㄎ", "h": "ㄏ",
    "j": "ㄐ", "q": "ㄑ", "x": "ㄒ",
    "zh": "ㄓ", "ch": "ㄔ", "sh": "ㄕ", "r": "ㄖ",
    "z": "ㄗ", "c": "ㄘ", "s": "ㄙ",
    "y": "ㄧ", "w": "ㄨ",
})

FINALS = MappingProxyType({
    "a": "ㄚ", "o": "ㄛ", "e": "ㄜ", "i": "ㄧ", "u": "ㄨ", "v": "ㄩ",
    "ai": "ㄞ", "ei": "ㄟ", "ao": "ㄠ", "ou": "ㄡ",
    "an": "ㄢ", "en": "ㄣ", "ang": "ㄤ", "eng": "ㄥ", "ong": "ㄨㄥ",
    "er": "ㄦ",
    "ia": "ㄧㄚ", "ie": "ㄧㄝ", "iao": "ㄧㄠ", "iu": "ㄧㄡ",
    "ian": "ㄧㄢ", "iang": "ㄧㄤ", "in": "ㄧㄣ", "ing": "ㄧㄥ", "iong": "ㄩㄥ",
    "ua": "ㄨㄚ", "uo": "ㄨㄛ", "uai": "ㄨㄞ", "ui": "ㄨㄟ",
    "uan": "ㄨㄢ", "uang": "ㄨㄤ", "un": "ㄨㄣ",
    "ue": "ㄩㄝ", "ve": "ㄩㄝ", "van": "ㄩㄢ", "vn": "ㄩㄣ",
})
# fmt: on

# y and w have no glyph of their own, so ㄧ and ㄨ always decode as finals.
ZHUYIN_INITIALS = MappingProxyType(
    {glyph: spelling for spelling, glyph in INITIALS.items() if spelling not in ("y", "w")}
)

ZHUYIN_FINALS = MappingProxyType(
    {
        **{glyph: spelling for spelling, glyph in FINALS.items() if spelling != "ue"},
        "ㄝ": "e",
    }
)


def lookup_initial(spelling: str) -> str | None:
    """Returns the zhuyin glyph of a pinyin initial, or None if unknown."""
    return INITIALS.get(spelling)


def lookup_final(spelling: str) -> str | None:
    """Returns the zhuyin glyphs of a pinyin final, or None if unknown."""
    return FINALS.get(spelling)


def initial_for_glyph(glyph: str) -> str | None:
    """Returns the pinyin initial written by a zhuyin glyph, or None."""
    return ZHUYIN_INITIALS.get(glyph)


def final_for_glyph(glyphs: str) -> str | None:
    """Returns the canonical pinyin final written by a zhuyin glyph sequence, or None."""
    return ZHUYIN_FINALS.get(glyphs)
