"""Configuration management for filekit CLI."""

import json
import math
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from common.constants import DEFAULT_CONFIG_DIR_NAME, DEFAULT_PIECE_SIZE_MB
from common.exceptions import ConfigError
from common.logging_config import get_logger

logger = get_logger(__name__)


def default_config_path() -> Path:
    """Default location of the config file (~/.filekit/config.json)."""
    return Path.home() / DEFAULT_CONFIG_DIR_NAME / 'config.json'


class Config:
    """Manages CLI configuration stored in JSON file."""

    DEFAULT_CONFIG = {
        "piece_size_mb": float(os.environ.get("FILEKIT_PIECE_SIZE_MB", DEFAULT_PIECE_SIZE_MB)),
        "mime_table_path": os.environ.get("FILEKIT_MIME_TABLE"),
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.filekit/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            self.config_path = Path(tempfile.gettempdir()) / DEFAULT_CONFIG_DIR_NAME / 'config.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("config root must be a JSON object")
                config = self.DEFAULT_CONFIG.copy()
                config.update(data)
                return config
            except (ValueError, OSError) as e:
                logger.warning(f"Invalid config file {self.config_path}: {e}, using defaults")
                backup_path = self.config_path.with_suffix('.json.bak')
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Could not back up config file: {copy_error}")
                return self.DEFAULT_CONFIG.copy()
        else:
            config = self.DEFAULT_CONFIG.copy()
            try:
                with open(self.config_path, 'w') as f:
                    json.dump(config, f, indent=2)
            except OSError as e:
                logger.warning(f"Could not write default config {self.config_path}: {e}")
            return config

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
        except OSError as e:
            logger.warning(f"Could not save config {self.config_path}: {e}")

    def get_piece_size_mb(self) -> float:
        """
        Get default piece size for split.

        Returns:
            Piece size in MB

        Raises:
            ConfigError: If the stored value is not a positive finite number
        """
        value = self.data.get('piece_size_mb', DEFAULT_PIECE_SIZE_MB)
        try:
            piece_size_mb = float(value)
        except (TypeError, ValueError):
            raise ConfigError(f"piece_size_mb in {self.config_path} is not a number: {value!r}")
        if not math.isfinite(piece_size_mb) or piece_size_mb <= 0:
            raise ConfigError(f"piece_size_mb in {self.config_path} must be a positive number, got {value!r}")
        return piece_size_mb

    def set_piece_size_mb(self, value: float) -> None:
        """
        Set default piece size and save to file.

        Args:
            value: Piece size in MB, must be positive
        """
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"Piece size must be positive, got {value}")
        self.data['piece_size_mb'] = value
        self.save()

    def get_mime_table_path(self) -> Optional[Path]:
        """
        Get the optional extra extension table file.

        Returns:
            Path to a JSON file of extension mappings, or None
        """
        table_path = self.data.get('mime_table_path')
        if not table_path:
            return None
        return Path(table_path).expanduser()
