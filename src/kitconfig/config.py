"""Configuration store for the kit CLI.

Settings live in ``$KITOPS_HOME/config.json`` (default ``~/.kitops``), or in
``profiles/<name>/config.json`` below that directory when a profile is used.
Every operation reloads the file; nothing is cached between calls.
"""
import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from .errors import ConfigError, ConfigIOError, DecodeError, InvalidInputError, UnknownKeyError
from .output import LogLevel, ProgressStyle

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "KITOPS_HOME"
DEFAULT_DIR_NAME = ".kitops"
PROFILES_DIR_NAME = "profiles"
CONFIG_FILE_NAME = "config.json"

# Display name -> attribute (and JSON key), in declaration order
FIELDS = {
    "LogLevel": "log_level",
    "Progress": "progress",
    "ConfigDir": "config_dir",
}


class Config(BaseModel):
    """User preferences stored in config.json.

    Keys missing from the file (or set to null) decode to an empty string,
    not to the values from default_config(). Keys match case-insensitively.
    """
    model_config = ConfigDict(strict=True)

    log_level: str = ""
    progress: str = ""
    config_dir: str = ""

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data):
        if not isinstance(data, dict):
            return data
        # Later keys win when two differ only in case
        return {k.lower(): v for k, v in data.items() if v is not None}


def default_config() -> Config:
    return Config(
        log_level=LogLevel.INFO.value,
        progress=ProgressStyle.PLAIN.value,
        config_dir="",
    )


def get_config_path(profile: Optional[str] = None, env: Optional[Mapping[str, str]] = None,
                    home: Optional[Path] = None) -> Path:
    """Resolve the config file path for a profile (or the default one).

    Args:
        profile: Profile name; empty or None selects the top-level file
        env: Environment mapping, defaults to os.environ
        home: User home directory, defaults to Path.home()

    Returns:
        Path to config.json. The file and its directory may not exist.
    """
    if env is None:
        env = os.environ

    config_dir = env.get(HOME_ENV_VAR)
    if config_dir:
        base = Path(config_dir)
    else:
        if home is None:
            try:
                home = Path.home()
            except RuntimeError:
                # Unknown home directory leaves a relative ".kitops"
                logger.debug("Could not determine user home directory")
                home = Path()
        base = Path(home) / DEFAULT_DIR_NAME

    if profile:
        base = base / PROFILES_DIR_NAME / profile
    config_path = base / CONFIG_FILE_NAME
    logger.debug("Resolved config path: %s", config_path)
    return config_path


def load_config(config_path: Union[str, Path, None]) -> Config:
    """Load config from a file, or the defaults if the file does not exist."""
    if not config_path:
        raise InvalidInputError()

    path = Path(config_path)
    try:
        with path.open(encoding="utf-8") as f:
            raw = f.read()
    except FileNotFoundError:
        logger.debug("No config at %s, using defaults", path)
        return default_config()
    except UnicodeDecodeError as err:
        raise DecodeError(path, str(err)) from err
    except OSError as err:
        raise ConfigIOError(path, err.strerror or str(err)) from err

    try:
        config = Config.model_validate_json(raw)
    except ValidationError as err:
        detail = "; ".join(e["msg"] for e in err.errors())
        raise DecodeError(path, detail) from err

    logger.debug("Loaded config from %s", path)
    return config


def save_config(config: Config, config_path: Union[str, Path]) -> None:
    """Write config to a file, replacing its contents.

    The parent directory must already exist.
    """
    path = Path(config_path)
    try:
        with path.open("w", encoding="utf-8") as f:
            f.write(config.model_dump_json() + "\n")
    except OSError as err:
        raise ConfigIOError(path, err.strerror or str(err)) from err
    logger.debug("Saved config to %s", path)


def resolve_key(key: str) -> str:
    """Map a user-supplied key to a Config attribute name.

    Accepts the display name with its first letter in either case
    (``LogLevel``, ``logLevel``) or the JSON key (``log_level``).
    """
    name = key[:1].upper() + key[1:]
    if name in FIELDS:
        return FIELDS[name]
    if key in FIELDS.values():
        return key
    raise UnknownKeyError(key)


def get_config_value(key: str, profile: Optional[str] = None,
                     env: Optional[Mapping[str, str]] = None) -> str:
    """Get a single config value."""
    config = load_config(get_config_path(profile, env))
    return getattr(config, resolve_key(key))


def set_config_value(key: str, value: str, profile: Optional[str] = None,
                     env: Optional[Mapping[str, str]] = None) -> Config:
    """Set a single config value and persist it.

    A file that cannot be loaded (including a corrupted one) is replaced by
    the defaults plus the new value.
    """
    attr = resolve_key(key)
    config_path = get_config_path(profile, env)
    try:
        config = load_config(config_path)
    except ConfigError as err:
        logger.warning("Could not load %s, starting from defaults: %s", config_path, err)
        config = default_config()

    setattr(config, attr, value)
    save_config(config, config_path)
    return config


def list_config(profile: Optional[str] = None,
                env: Optional[Mapping[str, str]] = None) -> list[tuple[str, str]]:
    """Return (display name, value) pairs for every field."""
    config = load_config(get_config_path(profile, env))
    return [(name, getattr(config, attr)) for name, attr in FIELDS.items()]


def reset_config(profile: Optional[str] = None,
                 env: Optional[Mapping[str, str]] = None) -> Config:
    """Overwrite the config file with the defaults."""
    config = default_config()
    save_config(config, get_config_path(profile, env))
    return config
