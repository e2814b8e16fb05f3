"""Shared pytest fixtures for all tests."""

import pytest
from pathlib import Path
from PIL import Image

from cli.config import Config


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .filekit directory
    """
    config_dir = tmp_path / '.filekit'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance.

    Args:
        temp_config_dir: Temporary config directory fixture

    Returns:
        Config instance with temp config file
    """
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def sample_file(tmp_path):
    """
    Create a sample text file without an extension.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to sample text file
    """
    file_path = tmp_path / 'notes'
    file_path.write_text('Sample content for testing')
    return file_path


@pytest.fixture
def png_file(tmp_path):
    """
    Create a real PNG image stored under a name without extension.

    Returns:
        Path to the PNG file
    """
    file_path = tmp_path / 'upload_0001'
    Image.new('RGB', (4, 4), color=(255, 0, 0)).save(file_path, format='PNG')
    return file_path


@pytest.fixture
def make_binary_file(tmp_path):
    """
    Factory for files of a given size with non-repeating content.

    Returns:
        Callable taking (name, size) and returning the file Path
    """
    def _make(name: str, size: int) -> Path:
        file_path = tmp_path / name
        pattern = bytes(range(251))
        data = (pattern * (size // len(pattern) + 1))[:size]
        file_path.write_bytes(data)
        return file_path

    return _make
