"""Config loader for the save decoder and its command-line front end.

Provides type-safe access to configuration with validation, default
fallbacks, and Windows-friendly path handling.
"""
import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigLoadError(Exception):
    """Raised when configuration loading or validation fails."""
    pass


class TextSettings(BaseModel):
    """Text decoding replacements."""

    species_symbol: str = Field(default="P", min_length=1, max_length=1)
    unknown_char: str = Field(default="?", min_length=1, max_length=1)


class DecoderSettings(BaseModel):
    """Decoder behaviour."""

    strict: bool = False


class LoggingSettings(BaseModel):
    """Logging output settings."""

    level: str = "INFO"
    enable_json: bool = False
    enable_console: bool = True
    log_dir: Optional[str] = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate level is a standard logging level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {LOG_LEVELS}, got {v}")
        return level


class OutputSettings(BaseModel):
    """CLI output settings."""

    indent: int = Field(default=2, ge=0, le=8)
    include_placeholders: bool = True


class AppConfig(BaseModel):
    """Top-level configuration."""

    text: TextSettings = Field(default_factory=TextSettings)
    decoder: DecoderSettings = Field(default_factory=DecoderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)


class ConfigLoader:
    """Config loader with validation and default fallbacks."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config loader.

        Args:
            config_path: Path to config file. Defaults to config/decoder_config.yaml
        """
        if config_path is None:
            self.config_path = Path("config") / "decoder_config.yaml"
        else:
            self.config_path = Path(config_path)

        # Normalize path separators for Windows compatibility
        self.config_path = Path(str(self.config_path).replace("\\", "/"))

        logger.debug(f"Config loader initialized with path: {self.config_path}")

    def load_config(self) -> AppConfig:
        """Load and validate configuration from file.

        Returns:
            Validated AppConfig instance

        Raises:
            ConfigLoadError: If loading or validation fails
        """
        try:
            if not self.config_path.exists():
                logger.warning(f"Config file not found: {self.config_path}, using defaults")
                return AppConfig()

            logger.info(f"Loading config from: {self.config_path}")

            with open(self.config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)

            if data is None:
                logger.warning("Config file is empty, using defaults")
                return AppConfig()

            if not isinstance(data, dict):
                raise ConfigLoadError(
                    f"Config root must be a mapping, got {type(data).__name__}"
                )

            config = AppConfig(**data)
            logger.info("Config loaded and validated successfully")
            return config

        except ConfigLoadError:
            raise
        except yaml.YAMLError as e:
            error_msg = f"Invalid YAML in config file: {e}"
            logger.error(error_msg)
            raise ConfigLoadError(error_msg) from e
        except ValidationError as e:
            error_msg = f"Config validation failed: {e}"
            logger.error(error_msg)
            raise ConfigLoadError(error_msg) from e
        except OSError as e:
            error_msg = f"Could not read config file: {e}"
            logger.error(error_msg)
            raise ConfigLoadError(error_msg) from e

    def get_section(self, section_name: str) -> Any:
        """Get a specific config section by name.

        Raises:
            ConfigLoadError: If section doesn't exist
        """
        config = self.load_config()

        section_map = {
            "text": config.text,
            "decoder": config.decoder,
            "logging": config.logging,
            "output": config.output,
        }

        if section_name not in section_map:
            available = ", ".join(section_map.keys())
            raise ConfigLoadError(f"Unknown config section '{section_name}'. Available: {available}")

        return section_map[section_name]
