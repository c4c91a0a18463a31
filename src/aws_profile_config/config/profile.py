"""Profile name resolution and the AWS section naming convention."""

import os
from typing import Mapping, Optional

# Environment variable holding an explicit profile override
PROFILE_ENV_VAR = "AWS_PROFILE"
# Lower priority environment variable naming the default profile
DEFAULT_PROFILE_ENV_VAR = "AWS_DEFAULT_PROFILE"

DEFAULT_PROFILE_NAME = "default"
PROFILE_PREFIX = "profile "


def resolve_profile(explicit: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> str:
    """Determine the effective profile name.

    Args:
        explicit: Profile name given by the caller, may be None or empty
        env: Environment mapping (defaults to os.environ)

    Returns:
        The explicit name, else AWS_PROFILE, else AWS_DEFAULT_PROFILE,
        else "default"
    """
    if explicit:
        return explicit

    env = os.environ if env is None else env
    for var in (PROFILE_ENV_VAR, DEFAULT_PROFILE_ENV_VAR):
        if var in env:
            return env[var]

    return DEFAULT_PROFILE_NAME


def section_name(profile: str) -> str:
    """Return the config file section name for a profile."""
    if profile == DEFAULT_PROFILE_NAME:
        return profile
    return f"{PROFILE_PREFIX}{profile}"


def strip_prefix(section: str) -> str:
    """Recover the logical profile name from a section name."""
    if section.startswith(PROFILE_PREFIX):
        return section[len(PROFILE_PREFIX):]
    return section
