from collections import Counter


def read_syllables(file_path: str) -> list[str]:
    """Reads whitespace-separated syllables from a text file, in order."""
    with open(file_path, encoding="utf-8") as f:
        return [syllable for line in f for syllable in line.split()]


def count_invalid(results: list[tuple[str, str | None]], verbose: bool = False) -> int:
    """Counts the syllables that failed to convert."""
    counts = Counter(output is None for _, output in results)
    if verbose:
        print(f"Converted {counts[False]} syllables, {counts[True]} invalid")
    return counts[True]
