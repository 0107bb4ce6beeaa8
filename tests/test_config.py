from pathlib import Path

import pytest

from oohtml.config import OohtmlConfig, load_config
from oohtml.element import Element
from oohtml.errors import ConfigError


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    config = OohtmlConfig()
    assert config.base_url == ""
    assert config.blocks_dir == Path("blocks")
    assert config.block_suffix == ".html"
    assert config.charset == "utf-8"


def test_load_camel_case_keys(tmp_path: Path) -> None:
    path = _write(tmp_path / "oohtml.yaml", "baseUrl: https://example.com\nblocksDir: tpl\n")

    config = load_config(path)

    assert config.base_url == "https://example.com"
    assert config.blocks_dir == tmp_path / "tpl"


def test_load_snake_case_keys(tmp_path: Path) -> None:
    path = _write(tmp_path / "oohtml.yaml", f"base_url: /app\nblocks_dir: {tmp_path}\nblock_suffix: .htm\n")

    config = load_config(path)

    assert config.base_url == "/app"
    assert config.blocks_dir == tmp_path
    assert config.block_suffix == ".htm"


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path / "empty.yaml", ""))
    assert config.base_url == ""
    assert config.blocks_dir == tmp_path / "blocks"


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "unknown_setting: 1\n",
        "baseUrl: [1, 2]\n",
        "baseUrl: [unclosed\n",
    ],
)
def test_invalid_config(tmp_path: Path, text: str) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path / "bad.yaml", text))


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yaml")


def test_base_url_threads_into_elements(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path / "oohtml.yaml", "baseUrl: https://example.com\n"))
    form = Element("form", base_url=config.base_url).set_action("/send")
    assert form.render() == '<form action="https://example.com/send"></form>'
