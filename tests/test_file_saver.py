import pandas as pd

from file_saver import save_conversions, save_dataframe_to_tsv


def test_save_dataframe_to_tsv(tmp_path):
    df = pd.DataFrame({"col1": ["a", "b"], "col2": ["c", "d"]})
    output_path = tmp_path / "output.tsv"

    save_dataframe_to_tsv(df, output_path)

    assert output_path.read_text(encoding="utf-8").splitlines() == ["a\tc", "b\td"]


def test_save_conversions(tmp_path):
    output_path = tmp_path / "conversions.tsv"

    save_conversions([("ma3", "mǎ"), ("zhang6", None)], output_path)

    lines = output_path.read_text(encoding="utf-8").splitlines()
    assert lines == ["ma3\tmǎ", "zhang6\t?"]


def test_save_conversions_placeholder(tmp_path):
    output_path = tmp_path / "conversions.tsv"

    save_conversions([("ㄐˇ", None)], output_path, invalid_placeholder="-")

    assert output_path.read_text(encoding="utf-8").splitlines() == ["ㄐˇ\t-"]
