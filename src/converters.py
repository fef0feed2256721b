"""
Conversions between numbered pinyin, tone-marked pinyin and zhuyin.

Every function takes a single syllable and returns the converted syllable,
or None when the input is not a valid Mandarin syllable.
"""

from pinyin import convert_pinyin, decode_pinyin, encode_pinyin
from splitter import Syllable, split
from zhuyin import decode_zhuyin, encode_zhuyin

__all__ = [
    "Syllable",
    "convert_pinyin",
    "decode_pinyin",
    "decode_zhuyin",
    "encode_pinyin",
    "encode_zhuyin",
    "pinyin_to_zhuyin",
    "split",
    "zhuyin_to_pinyin",
]


def pinyin_to_zhuyin(toned: str) -> str | None:
    """Converts tone-marked pinyin (e.g., mǎ) to zhuyin (e.g., ㄇㄚˇ)."""
    if toned == "ê":
        return "ㄝ"
    numbered = decode_pinyin(toned)
    return None if numbered is None else encode_zhuyin(numbered)


def zhuyin_to_pinyin(zhuyin: str) -> str | None:
    """Converts zhuyin (e.g., ㄇㄚˇ) to tone-marked pinyin (e.g., mǎ)."""
    if zhuyin == "ㄝ":
        return "ê"
    numbered = decode_zhuyin(zhuyin)
    return None if numbered is None else encode_pinyin(numbered)
