"""Loader settings file handling."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ruamel.yaml import YAML, YAMLError
from pydantic import ValidationError

from lxcconf.models.config import LoaderConfig


logger = logging.getLogger(__name__)

SETTINGS_ENV = "LXCCONF_SETTINGS"


def _read_yaml(file_path: Path) -> Dict[str, Any]:
    """Read and parse a YAML file, an empty file giving an empty mapping."""
    yaml = YAML(typ="safe")
    try:
        data = yaml.load(file_path.read_text())
    except YAMLError as e:
        logger.error(f"Failed to parse settings file {file_path}: {e}")
        raise ValueError(f"Invalid settings file {file_path}: {e}") from e
    return data or {}


def load_settings(path: Optional[Union[str, Path]] = None) -> LoaderConfig:
    """Load loader settings.

    The file named by ``path`` is used, falling back to the one named by
    the LXCCONF_SETTINGS environment variable. Without either, defaults
    are returned. Unparseable YAML raises ValueError.
    """
    if path is None:
        path = os.environ.get(SETTINGS_ENV)
    if not path:
        return LoaderConfig()

    settings_file = Path(path)
    if not settings_file.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_file}")

    data = _read_yaml(settings_file)
    # Settings may live under a "loader" section or at the top level
    if isinstance(data, dict) and "loader" in data:
        data = data["loader"] or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {settings_file}")

    try:
        settings = LoaderConfig(**data)
    except ValidationError as e:
        logger.error(f"Invalid settings in {settings_file}: {e}")
        raise

    logger.debug(f"Loaded settings from {settings_file}")
    return settings
