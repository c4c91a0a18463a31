"""Configuration providers for AWS profile data."""

import configparser
import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional

from .loader import ProfileDocument, Source, load_config_file
from .profile import DEFAULT_PROFILE_NAME, strip_prefix
from .schema import CONFIG_FIELDS, AWSConfig, lookup_env

logger = logging.getLogger(__name__)


class ConfigProvider(ABC):
    """Base class for configuration providers."""

    @abstractmethod
    def config(self, profile: Optional[str] = None) -> AWSConfig:
        """Get the configuration for a profile (the default profile if None)."""
        pass

    @abstractmethod
    def list_profiles(self, roles_only: bool = False) -> List[str]:
        """List the profile names this provider knows about."""
        pass


class IniConfigProvider(ConfigProvider):
    """Provider for configuration stored in an AWS config file."""

    def __init__(
        self,
        source: Optional[Source] = None,
        env: Optional[Mapping[str, str]] = None,
        document: Optional[ProfileDocument] = None,
    ):
        """Initialize the provider.

        Args:
            source: Path, URL, bytes or stream holding the config file
                (defaults to AWS_CONFIG_FILE, then ~/.aws/config)
            env: Environment mapping (defaults to os.environ)
            document: An already loaded document, used instead of source
        """
        self.document = document if document is not None else load_config_file(source, env)

    @property
    def path(self):
        return self.document.path

    def config(self, profile: Optional[str] = None) -> AWSConfig:
        """Get the configuration attributes of a profile.

        Raises:
            ProfileNotFoundError: If neither ``<profile>`` nor ``profile <profile>`` exists
        """
        profile = profile or DEFAULT_PROFILE_NAME
        section = self.document.profile(profile)

        logger.debug(f"Read {len(section)} attribute(s) for profile '{profile}' from section '{section.name}'")
        return AWSConfig.from_attributes(dict(section.items()), profile=profile)

    def list_profiles(self, roles_only: bool = False) -> List[str]:
        """List profile names found in the config file.

        Args:
            roles_only: Only include profiles declaring a role_arn
        """
        profiles = []
        for name in self.document.sections():
            if name == configparser.DEFAULTSECT:
                continue
            if roles_only and not self.document.parser.has_option(name, "role_arn"):
                continue
            profiles.append(strip_prefix(name))

        return sorted(profiles)


class EnvConfigProvider(ConfigProvider):
    """Provider for configuration held in environment variables."""

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        self.env = os.environ if env is None else env

    def config(self, profile: Optional[str] = None) -> AWSConfig:
        """Get configuration from environment variables.

        The profile is not used for lookups; it only names the returned record.
        """
        raw: Dict[str, str] = {}
        env_profile = ""

        for attribute in CONFIG_FIELDS:
            value = lookup_env(attribute, self.env)
            if not value:
                continue
            if attribute.ini_key:
                raw[attribute.ini_key] = value
            elif attribute.name == "profile":
                env_profile = value

        return AWSConfig.from_attributes(raw, profile=profile or env_profile)

    def list_profiles(self, roles_only: bool = False) -> List[str]:
        """Profiles are not a concept of the environment, always empty."""
        return []
