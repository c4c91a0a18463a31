"""AWS profile configuration - resolve config and credentials for named profiles."""

__version__ = "0.1.0"

from .config import (
    AWSConfig,
    AWSConfigResolver,
    EnvConfigProvider,
    IniConfigProvider,
    resolve_profile,
)
from .credentials import (
    AccessKey,
    AWSCredentials,
    EnvCredentialProvider,
    IniCredentialProvider,
)

__all__ = [
    "AccessKey",
    "AWSConfig",
    "AWSConfigResolver",
    "AWSCredentials",
    "EnvConfigProvider",
    "EnvCredentialProvider",
    "IniConfigProvider",
    "IniCredentialProvider",
    "resolve_profile",
]
