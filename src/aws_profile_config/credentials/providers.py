"""Credential providers for AWS authentication."""

import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, Mapping, MutableMapping, Optional

from ..config.errors import IncompleteCredentialsError
from ..config.loader import ProfileDocument, Source, load_config_file, load_credentials_file
from ..config.profile import resolve_profile
from ..config.schema import CREDENTIAL_FIELDS, lookup_env
from .types import AWSCredentials, CredentialInput, normalize_credentials

logger = logging.getLogger(__name__)


class CredentialProvider(ABC):
    """Base class for credential providers."""

    @abstractmethod
    def credentials(self, profile: Optional[str] = None) -> AWSCredentials:
        """Get AWS credentials."""
        pass

    @abstractmethod
    def update_credentials(self, profile: Optional[str], creds: CredentialInput) -> None:
        """Replace the stored credentials of a profile in memory."""
        pass


def _complete(values: Dict[str, str], profile: Optional[str]) -> AWSCredentials:
    credentials = AWSCredentials(**values)
    if not credentials.has_keys:
        raise IncompleteCredentialsError(profile)
    return credentials


class IniCredentialProvider(CredentialProvider):
    """Provider for credentials stored in an AWS credentials file."""

    def __init__(
        self,
        source: Optional[Source] = None,
        env: Optional[Mapping[str, str]] = None,
        prefixed: bool = False,
        document: Optional[ProfileDocument] = None,
    ):
        """Initialize the provider.

        Args:
            source: Path, URL, bytes or stream holding the credentials
                (defaults to AWS_SHARED_CREDENTIALS_FILE, then ~/.aws/credentials)
            env: Environment mapping (defaults to os.environ)
            prefixed: Read the source as a config file, where non-default
                profiles are named ``profile <name>``
            document: An already loaded document, used instead of source
        """
        if document is None:
            load = load_config_file if prefixed else load_credentials_file
            document = load(source, env)
        self.document = document

    @property
    def path(self):
        return self.document.path

    def credentials(self, profile: Optional[str] = None) -> AWSCredentials:
        """Get credentials for a profile.

        An empty profile uses AWS_PROFILE, AWS_DEFAULT_PROFILE, then "default".

        Raises:
            ProfileNotFoundError: If the profile has no section
            IncompleteCredentialsError: If the access or secret key is missing
        """
        name = resolve_profile(profile, self.document.env)
        section = self.document.profile(name)

        values = {f.name: section.get(f.ini_key, "") for f in CREDENTIAL_FIELDS}
        return _complete(values, name)

    def update_credentials(self, profile: Optional[str], creds: CredentialInput) -> None:
        """Update a profile's credentials in the in-memory document.

        The profile section is created when missing. Inactive access keys are
        skipped. Call ``document.save()`` to persist the change.

        Raises:
            NilCredentialsError: If creds is None
            UnsupportedCredentialsError: If creds is not a supported type
        """
        credentials = normalize_credentials(creds)
        if credentials is None:
            return

        name = resolve_profile(profile, self.document.env)
        section = self.document.ensure_profile(name)

        for attribute in CREDENTIAL_FIELDS:
            value = getattr(credentials, attribute.name)
            if value:
                section[attribute.ini_key] = value
            elif attribute.ini_key in section:
                del section[attribute.ini_key]

        logger.info(f"Updated credentials for profile '{name}' in section '{section.name}'")


class EnvCredentialProvider(CredentialProvider):
    """Provider for environment variable credentials."""

    def __init__(self, env: Optional[MutableMapping[str, str]] = None):
        self.env = os.environ if env is None else env

    def credentials(self, profile: Optional[str] = None) -> AWSCredentials:
        """Get credentials from environment variables, ignoring the profile.

        Raises:
            IncompleteCredentialsError: If the access or secret key is missing
        """
        values = {f.name: lookup_env(f, self.env) or "" for f in CREDENTIAL_FIELDS}
        return _complete(values, None)

    def update_credentials(self, profile: Optional[str], creds: CredentialInput) -> None:
        """Set the credential environment variables, ignoring the profile.

        Raises:
            NilCredentialsError: If creds is None
            UnsupportedCredentialsError: If creds is not a supported type
        """
        credentials = normalize_credentials(creds)
        if credentials is None:
            return

        for attribute in CREDENTIAL_FIELDS:
            value = getattr(credentials, attribute.name)
            primary, *alternates = attribute.env_vars
            if value:
                self.env[primary.name] = value
            else:
                self.env.pop(primary.name, None)
            # alternates are always cleared
            for var in alternates:
                self.env.pop(var.name, None)

        logger.info("Updated credentials in environment")
