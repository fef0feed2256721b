import logging
import re
from re import Match

from rewrite import to_plain_final, to_umlaut_final
from splitter import NEUTRAL_TONE, Syllable, is_consonant, split
from syllable_table import lookup_final, lookup_initial
from tones import tone_final, untone_final

logger = logging.getLogger(__name__)

NUMBERED_SYLLABLE = re.compile(r"(?<![a-zü])[a-zü]+[1-5](?![0-9a-zü])", flags=re.IGNORECASE)


def encode_pinyin(numbered: str, require_tone: bool = False) -> str | None:
    """Converts a numbered pinyin syllable (e.g., zhuan4) to tone-marked pinyin (e.g., zhuàn)."""
    syllable = split(numbered, require_tone)
    if syllable is None:
        return None
    if syllable == ("", "e", NEUTRAL_TONE):
        return "ê"
    if syllable.final == "r":
        return "r"
    return encode_pinyin_from_parts(syllable)


def encode_pinyin_from_parts(syllable: Syllable) -> str | None:
    initial, final, tone = syllable
    if initial and lookup_initial(initial) is None:
        logger.debug("Rejected %r: unknown initial", syllable)
        return None
    if lookup_final(final) is None:
        logger.debug("Rejected %r: unknown final", syllable)
        return None
    return initial + tone_final(to_plain_final(initial, final), tone)


def decode_pinyin(toned: str) -> str | None:
    """Converts a tone-marked pinyin syllable (e.g., mǎ) to numbered pinyin (e.g., ma3)."""
    if toned == "ê":
        return "e5"
    if toned == "r":
        return "r5"
    syllable = decode_pinyin_to_parts(toned)
    if syllable is None:
        return None
    return f"{syllable.initial}{syllable.final}{syllable.tone}"


def decode_pinyin_to_parts(toned: str) -> Syllable | None:
    pos = 0
    while pos < len(toned) and is_consonant(toned[pos]):
        pos += 1
    initial, rest = toned[:pos], toned[pos:]
    if not rest:
        logger.debug("Rejected %r: no final", toned)
        return None
    if initial and lookup_initial(initial) is None:
        logger.debug("Rejected %r: unknown initial %r", toned, initial)
        return None

    untoned = untone_final(rest)
    if untoned is None:
        return None
    final, tone = untoned
    final = to_umlaut_final(initial, final)
    if lookup_final(final) is None:
        logger.debug("Rejected %r: unknown final %r", toned, final)
        return None
    return Syllable(initial, final, tone)


def _convert_pinyin_callback(m: Match[str]) -> str:
    token = m.group(0)
    r = encode_pinyin(token.lower().replace("ü", "v"))
    if r is None:
        return token
    if token.islower():
        return r
    # Only a leading capital or an all-caps syllable keeps its case.
    if token.isupper():
        return r.upper()
    if token[0].isupper() and token[1:].islower():
        return r[0].upper() + r[1:]
    return token


def convert_pinyin(s: str) -> str:
    """Converts numbered pinyin (e.g., ni2 hao3) to tone-marked pinyin (e.g., ní hǎo).

    Only tokens ending in a tone digit are touched, and tokens that are not
    valid syllables are left as they are.
    """
    return NUMBERED_SYLLABLE.sub(_convert_pinyin_callback, s)
