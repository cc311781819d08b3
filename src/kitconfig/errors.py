"""Error types raised by the config store."""


class ConfigError(Exception):
    """Base error for config store operations."""
    pass


class InvalidInputError(ConfigError):
    def __init__(self, detail: str = "config path is empty") -> None:
        super().__init__(detail)


class ConfigIOError(ConfigError):
    """Config file could not be opened, created or written."""
    def __init__(self, path, detail: str = "") -> None:
        msg = f"cannot access config file {path}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
        self.path = path


class DecodeError(ConfigError):
    """Config file exists but does not hold a valid config document."""
    def __init__(self, path, detail: str = "") -> None:
        msg = f"invalid config file {path}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
        self.path = path


class UnknownKeyError(ConfigError):
    def __init__(self, key: str) -> None:
        super().__init__(f"unknown configuration key: {key}")
        self.key = key
