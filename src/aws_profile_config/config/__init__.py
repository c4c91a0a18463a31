"""AWS config file loading, providers and profile resolution."""

from .errors import (
    AWSConfigError,
    IncompleteCredentialsError,
    NilCredentialsError,
    ProfileNotFoundError,
    SourceUnreadableError,
    UnsupportedCredentialsError,
)
from .loader import ProfileDocument, load_config_file, load_credentials_file
from .profile import DEFAULT_PROFILE_NAME, resolve_profile
from .providers import ConfigProvider, EnvConfigProvider, IniConfigProvider
from .resolver import AWSConfigResolver, merge
from .schema import AWSConfig

__all__ = [
    "AWSConfig",
    "AWSConfigError",
    "AWSConfigResolver",
    "ConfigProvider",
    "DEFAULT_PROFILE_NAME",
    "EnvConfigProvider",
    "IncompleteCredentialsError",
    "IniConfigProvider",
    "NilCredentialsError",
    "ProfileDocument",
    "ProfileNotFoundError",
    "SourceUnreadableError",
    "UnsupportedCredentialsError",
    "load_config_file",
    "load_credentials_file",
    "merge",
    "resolve_profile",
]
