"""Credential records and the credential shapes accepted for updates."""

import logging
from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional, Union

from botocore.credentials import Credentials, ReadOnlyCredentials
from pydantic import BaseModel, ConfigDict, Field

from ..config.errors import NilCredentialsError, UnsupportedCredentialsError

logger = logging.getLogger(__name__)


@dataclass
class AWSCredentials:
    """AWS credentials container."""
    access_key_id: str = ""
    secret_access_key: str = ""
    session_token: str = ""

    @property
    def has_keys(self) -> bool:
        """True when both the access key and the secret key are set."""
        return bool(self.access_key_id and self.secret_access_key)


class AccessKey(BaseModel):
    """An IAM access key, as returned by iam:CreateAccessKey."""

    model_config = ConfigDict(populate_by_name=True)

    access_key_id: str = Field(alias="AccessKeyId")
    secret_access_key: str = Field(alias="SecretAccessKey")
    status: Literal["Active", "Inactive"] = Field(default="Active", alias="Status")
    user_name: Optional[str] = Field(default=None, alias="UserName")

    @property
    def is_active(self) -> bool:
        return self.status == "Active"

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> "AccessKey":
        """Build from a create_access_key response or its AccessKey element."""
        return cls.model_validate(response.get("AccessKey", response))


CredentialInput = Union[AWSCredentials, AccessKey, ReadOnlyCredentials, Credentials, None]


def normalize_credentials(creds: CredentialInput) -> Optional[AWSCredentials]:
    """Convert an update input to AWSCredentials.

    Returns:
        The credentials to store, or None when the input is an inactive
        access key and nothing should be written

    Raises:
        NilCredentialsError: If creds is None
        UnsupportedCredentialsError: If creds is not one of the accepted shapes
    """
    if creds is None:
        raise NilCredentialsError()

    if isinstance(creds, AWSCredentials):
        return AWSCredentials(creds.access_key_id, creds.secret_access_key, creds.session_token or "")

    if isinstance(creds, AccessKey):
        if not creds.is_active:
            logger.warning(f"Skipping inactive access key {creds.access_key_id}")
            return None
        return AWSCredentials(creds.access_key_id, creds.secret_access_key)

    if isinstance(creds, Credentials):
        # Live credentials may refresh; store a consistent snapshot
        creds = creds.get_frozen_credentials()

    if isinstance(creds, ReadOnlyCredentials):
        return AWSCredentials(creds.access_key, creds.secret_key, creds.token or "")

    raise UnsupportedCredentialsError(creds)
