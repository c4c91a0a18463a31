"""Errors raised while loading and resolving AWS profile data."""

from typing import Optional


class AWSConfigError(Exception):
    """Base class for all errors raised by this package."""
    pass


class SourceUnreadableError(AWSConfigError):
    """Raised when a config or credentials source cannot be read or parsed."""

    def __init__(self, source: object, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Unable to read source '{source}': {reason}")


class ProfileNotFoundError(AWSConfigError, KeyError):
    """Raised when no section matches a profile name in any naming form."""

    def __init__(self, profile: str):
        self.profile = profile
        super().__init__(profile)

    def __str__(self) -> str:
        return f"Profile '{self.profile}' not found"


class IncompleteCredentialsError(AWSConfigError):
    """Raised when the access key and/or secret key are missing."""

    def __init__(self, profile: Optional[str] = None):
        self.profile = profile
        message = "incomplete credentials, missing access key and/or secret key"
        if profile:
            message = f"{message} for profile '{profile}'"
        super().__init__(message)


class UnsupportedCredentialsError(AWSConfigError, TypeError):
    """Raised when a credential update receives a shape it does not know."""

    def __init__(self, creds: object):
        self.creds = creds
        super().__init__(f"unsupported credential type: {type(creds).__name__}")


class NilCredentialsError(AWSConfigError, ValueError):
    """Raised when a credential update receives no credentials at all."""

    def __init__(self):
        super().__init__("nil credentials provided")
