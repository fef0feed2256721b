import logging
from typing import NamedTuple

logger = logging.getLogger(__name__)

VOWELS = "aeiouv"
NEUTRAL_TONE = 5


class Syllable(NamedTuple):
    initial: str
    final: str
    tone: int


def is_vowel(c: str) -> bool:
    return c in VOWELS


def is_consonant(c: str) -> bool:
    return "a" <= c <= "z" and not is_vowel(c)


def split(numbered: str, require_tone: bool = False) -> Syllable | None:
    """
    Splits a numbered pinyin syllable into its initial, final and tone.

    Parameters
    ----------
    numbered : str
        A syllable such as "shuang1". The tone digit may be omitted, in which
        case the neutral tone is assumed.
    require_tone : bool, optional
        Reject syllables without a trailing tone digit, by default False.

    Returns
    -------
    Syllable | None
        The parts of the syllable, or None if it is not well formed.
    """
    if numbered in ("r", "r5"):
        return Syllable("", "r", NEUTRAL_TONE)
    if not numbered.isascii():
        logger.debug("Rejected %r: not ASCII", numbered)
        return None

    pos = 0
    while pos < len(numbered) and is_consonant(numbered[pos]):
        pos += 1
    initial = numbered[:pos]

    while pos < len(numbered) and "a" <= numbered[pos] <= "z":
        pos += 1
    final = numbered[len(initial) : pos]

    rest = numbered[pos:]
    if not final or len(rest) > 1:
        logger.debug("Rejected %r: cannot split into initial and final", numbered)
        return None

    if not rest:
        if require_tone:
            logger.debug("Rejected %r: missing tone", numbered)
            return None
        return Syllable(initial, final, NEUTRAL_TONE)

    if rest not in "12345":
        logger.debug("Rejected %r: bad tone %r", numbered, rest)
        return None
    return Syllable(initial, final, int(rest))
