import os
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError
from yaml import safe_load

from sumo.config.sumo_config import SumoConfig
from sumo.errors import NotConfigured

from ..util import logger

DEFAULT_CONFIG_PATH = "~/.sumo/config.yml"


class ConfigStore:
    """Reads the sumo YAML config once and hands out its values."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(os.path.expanduser(str(path or DEFAULT_CONFIG_PATH)))
        self._config: Optional[SumoConfig] = None

    def load(self) -> SumoConfig:
        if self._config is None:
            self._config = self._read_config()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        value = getattr(self.load(), key, None)
        return default if value is None else value

    def _read_config(self) -> SumoConfig:
        logger.debug("Reading config from %s", self.path)
        try:
            with open(self.path) as f:
                loaded_yaml = safe_load(f)
        except FileNotFoundError:
            raise NotConfigured(self.path) from None

        if loaded_yaml is None:
            loaded_yaml = {}
        if not isinstance(loaded_yaml, dict):
            raise NotConfigured(self.path)

        try:
            return SumoConfig.model_validate(loaded_yaml)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise NotConfigured(self.path, f"invalid value for {fields}") from e
