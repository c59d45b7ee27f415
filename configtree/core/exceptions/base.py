"""
Base exception classes for the configtree package.
"""


class ConfigTreeError(Exception):
    """Base exception for all configtree errors."""
    pass


class LogicError(ConfigTreeError):
    """Raised when an operation that must never happen on a singleton is attempted."""

    def __init__(self, operation: str, type_name: str = None, message: str = None):
        self.operation = operation
        self.type_name = type_name
        if message is None:
            message = f"Object can not be {operation}."
        if type_name:
            message = f"{type_name}: {message}"
        super().__init__(message)


class InvalidArgumentError(ConfigTreeError, ValueError):
    """Raised when a write addresses a node with an unusable key."""

    def __init__(self, path: str, key: str = None, reason: str = None):
        self.path = path
        self.key = key
        self.reason = reason
        message = f"Invalid argument for path '{path}'"
        if key is not None:
            message += f" (key '{key}')"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class PathIndexError(ConfigTreeError, IndexError):
    """Raised when a sequence index is out of range."""

    def __init__(self, index: int, length: int, path: str = None):
        self.index = index
        self.length = length
        self.path = path
        message = f"Sequence index {index} out of range (length {length})"
        if path:
            message += f" at path '{path}'"
        super().__init__(message)


class ConfigurationError(ConfigTreeError):
    """Raised when a configuration type is declared with invalid settings."""

    def __init__(self, config_key: str = None, config_value: str = None, reason: str = None):
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
        message = "Configuration error"
        if config_key:
            message += f" for '{config_key}'"
        if config_value:
            message += f" with value '{config_value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
