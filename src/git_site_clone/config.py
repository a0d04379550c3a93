import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from mashumaro.exceptions import InvalidFieldValue, MissingField
from mashumaro.mixins.toml import DataClassTOMLMixin
from platformdirs import user_config_path

from .errors import ConfigCorruptError, ConfigWriteError

logger = logging.getLogger(__name__)

APP_NAME = "git-site-clone"
CONFIG_FILE_NAME = "default-config.toml"


# config file format:
#    base = "/home/me/src"
#
#    [mappings]
#    "github.com" = "/home/me/gh"
#    ...
@dataclass
class Config(DataClassTOMLMixin):
    base: Path = field(default_factory=Path)
    mappings: Dict[str, Path] = field(default_factory=dict)

    def add_mapping(self, host: str, path: Path) -> None:
        self.mappings[host] = path

    def remove_mapping(self, host: str) -> None:
        self.mappings.pop(host, None)


def default_config_path() -> Path:
    return user_config_path(APP_NAME) / CONFIG_FILE_NAME


class ConfigStore:
    """Persisted `Config`, one TOML file per user.

    The location is fixed by the platform's config directory convention,
    tests pass their own `path`.
    """

    def __init__(self, path: Path | None = None):
        self._path = default_config_path() if path is None else Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Config:
        cfg_path = self._path

        if not cfg_path.exists():
            logger.info(f"not found {cfg_path}, create default config")
            config = Config()
            self.store(config)
            return config

        content = self.read_text()
        try:
            config = Config.from_toml(content)
        except (tomllib.TOMLDecodeError, MissingField, InvalidFieldValue) as e:
            raise ConfigCorruptError(f"invalid config {cfg_path}: {e}") from e

        logger.debug(f"{config=}")
        return config

    def store(self, config: Config) -> None:
        cfg_path = self._path
        try:
            cfg_path.parent.mkdir(parents=True, exist_ok=True)
            cfg_path.write_text(config.to_toml(), encoding="utf-8")
        except OSError as e:
            raise ConfigWriteError(f"cannot write config {cfg_path}: {e}") from e
        logger.debug(f"stored config to {cfg_path}")

    def read_text(self) -> str:
        try:
            return self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigCorruptError(f"cannot read config {self._path}: {e}") from e
