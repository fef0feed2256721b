from splitter import Syllable, split


def test_split():
    assert split("shuang1") == Syllable("sh", "uang", 1)
    assert split("ma3") == ("m", "a", 3)
    assert split("er2") == ("", "er", 2)
    assert split("lv4") == ("l", "v", 4)


def test_split_rhotic_syllable():
    assert split("r") == ("", "r", 5)
    assert split("r5") == ("", "r", 5)
    assert split("r5", require_tone=True) == ("", "r", 5)


def test_split_missing_tone():
    assert split("ma") == ("m", "a", 5)
    assert split("ma", require_tone=True) is None


def test_split_invalid():
    for s in ["zh9", "zh3", "ma0", "ma6", "ma33", "ma3a", "mǎ", "啊", "", "3", "MA3"]:
        assert split(s) is None, s
