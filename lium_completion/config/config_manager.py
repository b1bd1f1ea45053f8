from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import ValidationError

from lium_completion.config.models import CompletionConfig
from lium_completion.utils.errors import ConfigError
from lium_completion.utils.logging import get_logger

logger = get_logger(__name__)


class ConfigManager:
    """Manages completion settings stored as YAML under ~/.lium

    A tab press only reads the file: ``create_default`` is left off there and
    a missing file means the built-in defaults. ``strict=False`` also turns a
    broken file into the defaults, so completion keeps working while the
    error goes to the log.
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        create_default: bool = False,
        strict: bool = True,
    ):
        self.config_dir = Path.home() / ".lium"

        # Determine config file location
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = self.config_dir / "completion.yaml"

        if create_default and not self.config_path.exists():
            self._create_default_config()

        try:
            self.config = self._load_config()
        except ConfigError as e:
            if strict:
                raise
            logger.warning(f"{e}; completing with default settings")
            self.config = CompletionConfig()

    def _load_config(self) -> CompletionConfig:
        data = self._load_config_file()
        try:
            config = CompletionConfig(**data)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid configuration in {self.config_path}",
                config_path=self.config_path,
                hint=str(e),
            ) from e
        logger.debug(f"Config loaded from {self.config_path}")
        return config

    def _create_default_config(self):
        """Create default configuration file"""
        default_config = CompletionConfig().model_dump()

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as f:
                yaml.dump(default_config, f, default_flow_style=False)
        except OSError as e:
            logger.warning(f"Could not create default config at {self.config_path}: {e}")
            return
        logger.info(f"Created default config at {self.config_path}")

    def _load_config_file(self) -> Dict:
        """Load configuration from YAML file, empty when there is none"""
        if not self.config_path.exists():
            return {}
        try:
            with open(self.config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Could not parse {self.config_path}",
                config_path=self.config_path,
                hint=str(e),
            ) from e
        except OSError as e:
            raise ConfigError(f"Could not read {self.config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Expected a mapping at the top of {self.config_path}",
                config_path=self.config_path,
            )
        return data
