import logging

from rewrite import to_pinyin_parts, to_zhuyin_parts
from splitter import NEUTRAL_TONE, Syllable, split
from syllable_table import final_for_glyph, initial_for_glyph, lookup_final, lookup_initial
from tones import zhuyin_tone, zhuyin_tone_mark

logger = logging.getLogger(__name__)


def encode_zhuyin(numbered: str, require_tone: bool = False) -> str | None:
    """Converts a numbered pinyin syllable (e.g., ma3) to zhuyin (e.g., ㄇㄚˇ)."""
    syllable = split(numbered, require_tone)
    if syllable is None:
        return None
    if syllable == ("", "e", NEUTRAL_TONE):
        return "ㄝ"
    if syllable.final == "r":
        return "ㄦ" + zhuyin_tone_mark(NEUTRAL_TONE)
    return encode_zhuyin_from_parts(syllable)


def encode_zhuyin_from_parts(syllable: Syllable) -> str | None:
    if syllable.initial and lookup_initial(syllable.initial) is None:
        logger.debug("Rejected %r: unknown initial", syllable)
        return None

    initial, final = to_zhuyin_parts(syllable.initial, syllable.final)
    glyphs = lookup_initial(initial) if initial else ""
    if final:
        final_glyphs = lookup_final(final)
        if final_glyphs is None:
            logger.debug("Rejected %r: unknown final %r", syllable, final)
            return None
        glyphs += final_glyphs
    return glyphs + zhuyin_tone_mark(syllable.tone)


def decode_zhuyin(zhuyin: str) -> str | None:
    """Converts a zhuyin syllable (e.g., ㄇㄚˇ) to numbered pinyin (e.g., ma3)."""
    if zhuyin == "ㄝ":
        return "e5"
    if zhuyin == "ㄦ" + zhuyin_tone_mark(NEUTRAL_TONE):
        return "r5"
    syllable = decode_zhuyin_to_parts(zhuyin)
    if syllable is None:
        return None
    return f"{syllable.initial}{syllable.final}{syllable.tone}"


def decode_zhuyin_to_parts(zhuyin: str) -> Syllable | None:
    body, tone = zhuyin, zhuyin_tone(zhuyin[-1:])
    if tone is None:
        tone = 1
    else:
        body = body[:-1]
    if not body:
        logger.debug("Rejected %r: no glyphs", zhuyin)
        return None

    initial = initial_for_glyph(body[0]) or ""
    if initial:
        body = body[1:]

    final = ""
    if body:
        final = final_for_glyph(body)
        if final is None:
            logger.debug("Rejected %r: unknown final %r", zhuyin, body)
            return None

    parts = to_pinyin_parts(initial, final)
    if parts is None:
        logger.debug("Rejected %r: %r takes no empty final", zhuyin, initial)
        return None
    return Syllable(*parts, tone)
