"""
Package-level settings.

These settings tune the behaviour of configtree itself (default write policy
and logging). They are plain in-memory values and are never read from files
or the environment.
"""

from dataclasses import dataclass

from configtree.core.enums import WritePolicy


@dataclass
class Settings:
    """
    Runtime settings of the configtree package.

    `default_write_policy` is used by configuration types that do not declare
    their own `write_policy`.
    """
    default_write_policy: WritePolicy = WritePolicy.STRICT
    log_level: str = "INFO"
    json_logs: bool = False
    debug: bool = False


_settings = Settings()


def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return _settings
