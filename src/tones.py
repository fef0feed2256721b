import logging
from types import MappingProxyType

from splitter import NEUTRAL_TONE, is_vowel

logger = logging.getLogger(__name__)

PINYIN_TONE_MARKS = MappingProxyType(
    {
        "a": "āáǎà",
        "o": "ōóǒò",
        "e": "ēéěè",
        "i": "īíǐì",
        "u": "ūúǔù",
        "ü": "ǖǘǚǜ",
    }
)

# Tone 1 carries no mark in zhuyin.
ZHUYIN_TONE_MARKS = MappingProxyType({1: "", 2: "ˊ", 3: "ˇ", 4: "ˋ", 5: "˙"})

_MARKED_VOWELS = MappingProxyType(
    {
        mark: (base, tone)
        for base, marks in PINYIN_TONE_MARKS.items()
        for tone, mark in enumerate(marks, 1)
    }
)
_ZHUYIN_TONES = MappingProxyType({mark: tone for tone, mark in ZHUYIN_TONE_MARKS.items() if mark})


def _mark_position(final: str) -> int:
    if "a" in final:
        return final.index("a")
    if final[0] in "oe" or len(final) == 1 or not is_vowel(final[1]):
        return 0
    return 1


def tone_final(final: str, tone: int) -> str:
    """Puts the tone mark of `tone` on the right vowel of an ASCII final (e.g., uan, 4 -> uàn)."""
    if tone != NEUTRAL_TONE:
        pos = _mark_position(final)
        vowel = "ü" if final[pos] == "v" else final[pos]
        final = final[:pos] + PINYIN_TONE_MARKS[vowel][tone - 1] + final[pos + 1 :]
    return final.replace("v", "ü")


def untone_final(toned: str) -> tuple[str, int] | None:
    """Strips the tone mark from a final, returning the ASCII final and its tone.

    A final without a mark is in the neutral tone; a final with two marks is invalid.
    """
    tone = NEUTRAL_TONE
    chars = []
    for c in toned:
        if c in _MARKED_VOWELS:
            if tone != NEUTRAL_TONE:
                logger.debug("Rejected %r: more than one tone mark", toned)
                return None
            c, tone = _MARKED_VOWELS[c]
        chars.append("v" if c == "ü" else c)
    return "".join(chars), tone


def zhuyin_tone_mark(tone: int) -> str:
    return ZHUYIN_TONE_MARKS[tone]


def zhuyin_tone(mark: str) -> int | None:
    """Returns the tone written by a trailing zhuyin mark, or None if `mark` is not one."""
    return _ZHUYIN_TONES.get(mark)
