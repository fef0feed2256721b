import os
from typing import Any

import toml
from dotenv import load_dotenv

DEFAULT_CONFIG_PATH = "pinyin_zhuyin.toml"

DEFAULT_CONFIG: dict[str, Any] = {
    "require_tone": False,
    "invalid_placeholder": "?",
    "log_level": "WARNING",
}


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config(path: str | None = None) -> dict[str, Any]:
    """
    Loads the command line settings.

    Settings come from the defaults, then the [pinyin_zhuyin] table of a TOML
    file, then the environment (a .env file is honored).

    Parameters
    ----------
    path : str, optional
        The TOML file to read. Falls back to $PINYIN_ZHUYIN_CONFIG, then to
        pinyin_zhuyin.toml in the working directory if it exists.

    Returns
    -------
    dict
        The merged settings.
    """
    load_dotenv()
    config = dict(DEFAULT_CONFIG)

    if path is None:
        path = os.environ.get("PINYIN_ZHUYIN_CONFIG")
        if path is None and os.path.exists(DEFAULT_CONFIG_PATH):
            path = DEFAULT_CONFIG_PATH
    if path is not None:
        with open(path) as f:
            settings = toml.load(f).get("pinyin_zhuyin", {})
        unknown = set(settings) - set(DEFAULT_CONFIG)
        if unknown:
            raise ValueError(f"Unknown settings in {path}: {', '.join(sorted(unknown))}")
        config.update(settings)

    if "PINYIN_ZHUYIN_REQUIRE_TONE" in os.environ:
        config["require_tone"] = _parse_bool(os.environ["PINYIN_ZHUYIN_REQUIRE_TONE"])
    return config
