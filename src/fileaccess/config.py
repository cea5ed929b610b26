"""Config I/O for ~/.fileaccess/config.yaml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from . import conventions
from .fileutil import open_for_reading, write
from .schema import FileAccessConfig

logger = logging.getLogger(__name__)


def config_path() -> Path:
    """Return the path to ~/.fileaccess/config.yaml, expanded."""
    return Path(conventions.FILEACCESS_HOME).expanduser() / conventions.CONFIG_FILENAME


def load_config(path: Path | None = None) -> FileAccessConfig:
    """Load and parse the config file, returning defaults if missing or invalid.

    An unreadable file counts as missing. A file with invalid values logs
    a warning and yields defaults. Malformed YAML raises yaml.YAMLError.
    """
    if path is None:
        path = config_path()

    handle = open_for_reading(path)
    if handle is None:
        return FileAccessConfig()
    with handle:
        text = handle.read().decode(conventions.TEXT_ENCODING)

    data = yaml.safe_load(text)
    if not data:
        return FileAccessConfig()

    try:
        return FileAccessConfig(**data)
    except (TypeError, ValidationError) as exc:
        logger.warning("Invalid config at %s: %s. Using defaults.", path, exc)
        return FileAccessConfig()


def save_config(config: FileAccessConfig, path: Path | None = None) -> None:
    """Write *config* as YAML, replacing any previous file."""
    if path is None:
        path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump()
    text = yaml.dump(data, default_flow_style=False, sort_keys=False)
    write(path, True, text)
