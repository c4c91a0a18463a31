"""AWS credential lookup and in-memory credential updates."""

from .providers import CredentialProvider, EnvCredentialProvider, IniCredentialProvider
from .types import AccessKey, AWSCredentials, normalize_credentials

__all__ = [
    "AccessKey",
    "AWSCredentials",
    "CredentialProvider",
    "EnvCredentialProvider",
    "IniCredentialProvider",
    "normalize_credentials",
]
