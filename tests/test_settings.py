from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from duelsim.core.settings import Settings
from duelsim.errors import SettingsError


@pytest.fixture(autouse=True)
def isolated_user_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    target = tmp_path / "user" / "settings.yaml"
    monkeypatch.setattr(Settings, "default_user_path", staticmethod(lambda: target))
    return target


def test_packaged_defaults() -> None:
    s = Settings.load()
    assert s.pacing.delay_seconds == 1.0
    assert s.rng.seed is None
    assert s.logging.level == "WARNING"


def test_user_file_overrides_defaults(tmp_path: Path) -> None:
    fp = tmp_path / "override.yaml"
    fp.write_text(
        textwrap.dedent(
            """
            pacing:
              delay_seconds: 0.25
            logging:
              level: debug
            """
        ),
        encoding="utf-8",
    )

    s = Settings.load(user_path=fp)

    assert s.pacing.delay_seconds == 0.25
    assert s.logging.level == "DEBUG"
    # Untouched sections keep defaults
    assert s.rng.seed is None


def test_user_config_dir_is_picked_up(isolated_user_dir: Path) -> None:
    isolated_user_dir.parent.mkdir(parents=True)
    isolated_user_dir.write_text("rng:\n  seed: 11\n", encoding="utf-8")

    assert Settings.load().rng.seed == 11


def test_missing_explicit_file_falls_back(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    s = Settings.load(user_path=tmp_path / "nope.yaml")
    assert s.pacing.delay_seconds == 1.0
    assert "User settings file not found" in caplog.text


@pytest.mark.parametrize(
    "content",
    [
        "pacing: [1, 2",
        "- just\n- a list\n",
        "pacing:\n  delay_seconds: -1\n",
        "pacing:\n  delay_seconds: soon\n",
        "pacing:\n  speed: 3\n",
        "rng:\n  seed: abc\n",
        "logging:\n  level: LOUD\n",
    ],
)
def test_invalid_files_raise_settings_error(tmp_path: Path, content: str) -> None:
    fp = tmp_path / "bad.yaml"
    fp.write_text(content, encoding="utf-8")
    with pytest.raises(SettingsError):
        Settings.load(user_path=fp)

