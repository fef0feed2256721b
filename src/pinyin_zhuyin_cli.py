import argparse
import logging
import sys
from functools import partial
from pathlib import Path
from typing import Callable

from tqdm import tqdm

from cli_config import load_config
from converters import (
    decode_pinyin,
    decode_zhuyin,
    encode_pinyin,
    encode_zhuyin,
    pinyin_to_zhuyin,
    zhuyin_to_pinyin,
)
from file_saver import save_conversions
from syllable_files import count_invalid, read_syllables

logger = logging.getLogger(__name__)

CONVERTERS: dict[str, Callable[..., str | None]] = {
    "encode-pinyin": encode_pinyin,
    "decode-pinyin": decode_pinyin,
    "encode-zhuyin": encode_zhuyin,
    "decode-zhuyin": decode_zhuyin,
    "pinyin-to-zhuyin": pinyin_to_zhuyin,
    "zhuyin-to-pinyin": zhuyin_to_pinyin,
}

# Directions that read numbered pinyin, where the tone digit may be omitted.
NUMBERED_INPUT = ("encode-pinyin", "encode-zhuyin")


def convert_syllables(
    syllables: list[str],
    direction: str,
    require_tone: bool = False,
    verbose: bool = False,
) -> list[tuple[str, str | None]]:
    """
    Converts each syllable in the given direction.

    Parameters
    ----------
    syllables : list[str]
        The syllables to convert.
    direction : str
        One of the keys of CONVERTERS.
    require_tone : bool, optional
        Reject numbered pinyin without a tone digit, by default False.
    verbose : bool, optional
        Whether to show a progress bar, by default False.

    Returns
    -------
    list[tuple[str, str | None]]
        (input, output) pairs in input order; output is None for invalid input.
    """
    convert = CONVERTERS[direction]
    if direction in NUMBERED_INPUT:
        convert = partial(convert, require_tone=require_tone)

    results = []
    for syllable in tqdm(syllables, desc="Converting syllables", disable=not verbose):
        output = convert(syllable)
        if output is None:
            logger.warning("Invalid syllable for %s: %r", direction, syllable)
        results.append((syllable, output))
    return results


def main() -> int:
    """
    The main function for the script.
    """
    parser = argparse.ArgumentParser(
        description="Convert Mandarin syllables between numbered pinyin, tone-marked pinyin and zhuyin."
    )
    parser.add_argument("direction", choices=sorted(CONVERTERS), help="The conversion to apply.")
    parser.add_argument("syllables", nargs="*", help="The syllables to convert.")
    parser.add_argument(
        "--input-path",
        type=str,
        default=None,
        help="A file of whitespace-separated syllables to convert.",
    )
    parser.add_argument(
        "--output-path",
        type=str,
        default=None,
        help="Save input and output pairs to this TSV file instead of printing.",
    )
    parser.add_argument("--config", type=str, default=None, help="The path to a TOML config file.")
    parser.add_argument(
        "--require-tone",
        action="store_true",
        help="Reject numbered pinyin without a tone digit.",
    )
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    config = load_config(args.config)
    logging.basicConfig(level=logging.DEBUG if args.verbose else config["log_level"])
    require_tone = args.require_tone or config["require_tone"]

    syllables = list(args.syllables)
    if args.input_path:
        syllables += read_syllables(args.input_path)
    if not syllables:
        parser.error("no syllables given")

    results = convert_syllables(syllables, args.direction, require_tone, args.verbose)

    if args.output_path:
        save_conversions(results, Path(args.output_path), config["invalid_placeholder"])
    else:
        for _, output in results:
            print(config["invalid_placeholder"] if output is None else output)

    return 1 if count_invalid(results, args.verbose) else 0


if __name__ == "__main__":
    sys.exit(main())
