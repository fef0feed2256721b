import os

import toml

PYPROJECT = os.path.join(os.path.dirname(__file__), "..", "pyproject.toml")


def test_installed_modules_have_specific_names():
    with open(PYPROJECT) as f:
        project = toml.load(f)
    modules = project["tool"]["setuptools"]["py-modules"]
    assert not {"config", "main", "utils"} & set(modules)
    assert project["project"]["scripts"]["pinyin-zhuyin"] == "pinyin_zhuyin_cli:main"
    src = os.path.join(os.path.dirname(PYPROJECT), "src")
    assert sorted(modules) == sorted(f[:-3] for f in os.listdir(src) if f.endswith(".py"))
