from pathlib import Path

import pandas as pd

COLUMNS = ["input", "output"]


def save_dataframe_to_tsv(df: pd.DataFrame, output_path: Path):
    """Saves a DataFrame to a TSV file."""
    df.to_csv(output_path, sep="\t", index=False, header=False)


def save_conversions(
    results: list[tuple[str, str | None]], output_path: Path, invalid_placeholder: str = "?"
) -> None:
    """Saves (input, output) syllable pairs to a TSV file, one pair per line."""
    df = pd.DataFrame(results, columns=COLUMNS).fillna(invalid_placeholder)
    save_dataframe_to_tsv(df, output_path)
