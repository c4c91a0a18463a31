"""Resolution of a profile's configuration across default and source profiles."""

import logging
from typing import Dict, List, Mapping, Optional

from .loader import Source
from .providers import ConfigProvider, IniConfigProvider
from .schema import AWSConfig

logger = logging.getLogger(__name__)

# Values treated as unset when merging
_UNSET_VALUES = ("", "0")


def merge(*configs: AWSConfig) -> AWSConfig:
    """Combine records into one, later records overriding earlier ones.

    An attribute only overrides when its value is non-empty and not the
    literal "0", so a zero duration never replaces a configured one. The
    profile name is taken from the last record that has one.
    """
    attributes: Dict[str, str] = {}
    profile = ""

    for config in configs:
        for key, value in config.raw_attributes.items():
            if value not in _UNSET_VALUES:
                attributes[key] = value

        if config.profile:
            profile = config.profile

    return AWSConfig.from_attributes(attributes, profile=profile)


class AWSConfigResolver:
    """Resolves a profile's configuration, folding in the default and source profiles.

    Precedence, lowest to highest: default profile, source_profile, the
    requested profile. Only one source_profile hop is followed.
    """

    def __init__(
        self,
        config_provider: ConfigProvider,
        lookup_default_profile: bool = True,
        lookup_source_profile: bool = True,
    ):
        self.config_provider = config_provider
        self.lookup_default_profile = lookup_default_profile
        self.lookup_source_profile = lookup_source_profile

    @classmethod
    def from_source(
        cls, source: Optional[Source] = None, env: Optional[Mapping[str, str]] = None
    ) -> "AWSConfigResolver":
        """Create a resolver reading an AWS config file, with both lookups enabled."""
        return cls(IniConfigProvider(source, env=env))

    def with_lookup_default_profile(self, enabled: bool) -> "AWSConfigResolver":
        self.lookup_default_profile = enabled
        return self

    def with_lookup_source_profile(self, enabled: bool) -> "AWSConfigResolver":
        self.lookup_source_profile = enabled
        return self

    def with_config_provider(self, provider: ConfigProvider) -> "AWSConfigResolver":
        self.config_provider = provider
        return self

    def merge(self, *configs: AWSConfig) -> AWSConfig:
        return merge(*configs)

    def resolve(self, profile: Optional[str] = None) -> AWSConfig:
        """Resolve the merged configuration of a profile.

        Args:
            profile: Profile name; None returns the default profile as-is

        Raises:
            ProfileNotFoundError: If the profile, the default profile or the
                source_profile cannot be found
        """
        if not profile:
            return self.config_provider.config()

        target = self.config_provider.config(profile)
        chain: List[AWSConfig] = []

        if self.lookup_default_profile:
            chain.append(self.config_provider.config())

        if self.lookup_source_profile and target.source_profile:
            logger.debug(f"Profile '{profile}' uses source_profile '{target.source_profile}'")
            chain.append(self.config_provider.config(target.source_profile))

        chain.append(target)
        resolved = merge(*chain)
        logger.debug(f"Resolved profile '{profile}' from {len(chain)} record(s)")
        return resolved
