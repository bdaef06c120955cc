from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Optional

import yaml
from platformdirs import user_config_dir

from ..errors import SettingsError

logger = logging.getLogger(__name__)

APP_NAME = "duelsim"
USER_SETTINGS_FILE = "settings.yaml"

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass
class PacingSettings:
    delay_seconds: float = 1.0


@dataclass
class RngSettings:
    seed: Optional[int] = None


@dataclass
class LoggingSettings:
    level: str = "WARNING"


@dataclass
class Settings:
    pacing: PacingSettings = field(default_factory=PacingSettings)
    rng: RngSettings = field(default_factory=RngSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @staticmethod
    def default_user_path() -> Path:
        return Path(user_config_dir(appname=APP_NAME)) / USER_SETTINGS_FILE

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise SettingsError(f"could not read settings from {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"settings file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        try:
            pacing = PacingSettings(**(data.get("pacing") or {}))
            rng = RngSettings(**(data.get("rng") or {}))
            logging_ = LoggingSettings(**(data.get("logging") or {}))
        except TypeError as exc:
            raise SettingsError(f"unknown settings key: {exc}") from exc

        try:
            pacing.delay_seconds = float(pacing.delay_seconds)
        except (TypeError, ValueError) as exc:
            raise SettingsError("pacing.delay_seconds must be a number") from exc
        if pacing.delay_seconds < 0:
            raise SettingsError("pacing.delay_seconds must be non-negative")
        if rng.seed is not None and (isinstance(rng.seed, bool) or not isinstance(rng.seed, int)):
            raise SettingsError("rng.seed must be an integer or null")
        logging_.level = str(logging_.level).upper()
        if logging_.level not in _LEVELS:
            raise SettingsError(f"logging.level must be one of {sorted(_LEVELS)}")
        return Settings(pacing=pacing, rng=rng, logging=logging_)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and an optional user override file.

        When ``user_path`` is None, ``settings.yaml`` under the platform user
        config directory is used if present. An explicit path that does not
        exist is logged and ignored.
        """
        try:
            with resources.files("duelsim.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)
        else:
            candidate = cls.default_user_path()
            if candidate.exists():
                user_data = cls._load_yaml(candidate)
                logger.info("Loaded user settings from %s", candidate)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings
