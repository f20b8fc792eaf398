"""Configuration management for SubgramPy."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from multiprocessing import cpu_count

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from subgrampy.core.letters import validate_letters
from subgrampy.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for one solver run."""

    letters: str | None = Field(None, description="Letter sequence (prompted when missing)")
    dictionary: str | None = Field(
        None, description="Word list file, one word per line (built-in list when missing)"
    )
    jobs: int = Field(default_factory=cpu_count, ge=1)
    chunk_size: int = Field(
        Constants.DEFAULT_CHUNK_SIZE, ge=1, description="Largest number of candidates per task"
    )
    columns: int = Field(Constants.DEFAULT_COLUMNS, ge=1, description="Words per output row")
    min_display_length: int = Field(
        Constants.DEFAULT_MIN_DISPLAY_LENGTH, ge=1, description="Shortest word shown in the grid"
    )
    log_file: str | None = None
    verbose: bool = False
    debug: bool = False

    @field_validator("letters", mode="before")
    @classmethod
    def normalize_letters(cls, v):
        """Validate and lowercase the letter sequence when one is given."""
        if v is None or v == "":
            return None
        return validate_letters(v)


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "letters": get_value("letters", None),
        "dictionary": get_value("dictionary", None),
        "jobs": get_value("jobs", cpu_count()),
        "chunk_size": get_value("chunk_size", Constants.DEFAULT_CHUNK_SIZE),
        "columns": get_value("columns", Constants.DEFAULT_COLUMNS),
        "min_display_length": get_value(
            "min_display_length", Constants.DEFAULT_MIN_DISPLAY_LENGTH
        ),
        "log_file": get_value("log_file", None),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
