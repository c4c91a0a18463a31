"""Shared fixtures: sample AWS config/credentials documents and an isolated environment."""

import pytest

from aws_profile_config.config.providers import IniConfigProvider
from aws_profile_config.credentials.providers import IniCredentialProvider


CONFIG_TEXT = """\
[default]
region = us-east-2
mfa_serial = arn:aws:iam::123456789012:mfa/default-user
duration_seconds = 3600

[profile other]
region = us-west-1
custom_attribute = custom_value

[uncommon]
region = eu-west-1

[profile role]
role_arn = arn:aws:iam::123456789012:role/Admin
source_profile = default

[profile mfa]
role_arn = arn:aws:iam::123456789012:role/Mfa
source_profile = default
region = ap-southeast-2
external_id = qq
mfa_serial = arn:aws:iam::123456789012:mfa/mfa-user
duration_seconds = 0

[profile chained]
role_arn = arn:aws:iam::123456789012:role/Chained
source_profile = other

[profile broken]
role_arn = arn:aws:iam::123456789012:role/Broken
source_profile = missing
"""

CREDENTIALS_TEXT = """\
[default]
aws_access_key_id = AKIADEFAULT
aws_secret_access_key = defaultsecret

[other]
aws_access_key_id = AKIAOTHER
aws_secret_access_key = othersecret
aws_session_token = othertoken

[incomplete]
aws_access_key_id = AKIAINCOMPLETE

[profile prefixed]
aws_access_key_id = AKIAPREFIXED
aws_secret_access_key = prefixedsecret
"""


@pytest.fixture
def env():
    """An empty environment, so tests never see the caller's AWS_* variables."""
    return {}


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config"
    path.write_text(CONFIG_TEXT)
    return path


@pytest.fixture
def credentials_path(tmp_path):
    path = tmp_path / "credentials"
    path.write_text(CREDENTIALS_TEXT)
    return path


@pytest.fixture
def config_provider(env):
    return IniConfigProvider(CONFIG_TEXT.encode(), env=env)


@pytest.fixture
def credential_provider(env):
    return IniCredentialProvider(CREDENTIALS_TEXT.encode(), env=env)
