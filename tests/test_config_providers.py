"""Tests for the INI and environment configuration providers."""

import pytest

from aws_profile_config.config.errors import ProfileNotFoundError, SourceUnreadableError
from aws_profile_config.config.providers import ConfigProvider, EnvConfigProvider, IniConfigProvider

from conftest import CONFIG_TEXT


class TestIniConfigProviderInit:
    """IniConfigProvider construction"""

    def test_explicit_source(self, config_path, env):
        provider = IniConfigProvider(str(config_path), env=env)
        assert provider.path == config_path

    def test_env_var_source(self, config_path):
        provider = IniConfigProvider(None, env={"AWS_CONFIG_FILE": str(config_path)})
        assert provider.path == config_path
        assert provider.config("other").region == "us-west-1"

    def test_bad_source(self, tmp_path, env):
        with pytest.raises(SourceUnreadableError):
            IniConfigProvider(str(tmp_path / "not-my-file"), env=env)

    def test_is_a_config_provider(self, config_provider):
        assert isinstance(config_provider, ConfigProvider)


class TestIniConfigProviderConfig:
    """IniConfigProvider.config"""

    def test_default_profile(self, config_provider):
        config = config_provider.config()
        assert config.profile == "default"
        assert config.region == "us-east-2"
        assert config.duration_seconds == 3600

    def test_default_ignores_profile_env_var(self):
        provider = IniConfigProvider(CONFIG_TEXT.encode(), env={"AWS_PROFILE": "other"})
        assert provider.config().profile == "default"
        assert provider.config().region == "us-east-2"

    def test_aws_format(self, config_provider):
        config = config_provider.config("other")
        assert config.profile == "other"
        assert config.region == "us-west-1"
        assert config.get("custom_attribute") == "custom_value"

    def test_not_aws_format(self, config_provider):
        config = config_provider.config("uncommon")
        assert config.profile == "uncommon"
        assert config.region == "eu-west-1"

    def test_full_profile(self, config_provider):
        config = config_provider.config("mfa")
        assert config.role_arn == "arn:aws:iam::123456789012:role/Mfa"
        assert config.source_profile == "default"
        assert config.external_id == "qq"
        assert config.mfa_serial == "arn:aws:iam::123456789012:mfa/mfa-user"
        assert config.duration_seconds == 0
        assert len(config.raw_attributes) == 6

    def test_bad_profile_name(self, config_provider):
        with pytest.raises(ProfileNotFoundError) as exc_info:
            config_provider.config("not-a-profile")
        assert exc_info.value.profile == "not-a-profile"

    def test_each_call_is_fresh(self, config_provider):
        first = config_provider.config("other")
        config_provider.document.profile("other")["region"] = "sa-east-1"
        assert config_provider.config("other").region == "sa-east-1"
        assert first.region == "us-west-1"


class TestIniConfigProviderListProfiles:
    """IniConfigProvider.list_profiles"""

    def test_all_profiles(self, config_provider):
        assert config_provider.list_profiles() == [
            "broken", "chained", "default", "mfa", "other", "role", "uncommon",
        ]

    def test_roles_only(self, config_provider):
        assert config_provider.list_profiles(roles_only=True) == ["broken", "chained", "mfa", "role"]

    def test_literal_default_section_excluded(self, env):
        provider = IniConfigProvider(b"[DEFAULT]\nregion = us-east-1\n[profile b]\n[a]\n", env=env)
        assert provider.list_profiles() == ["a", "b"]

    def test_literal_default_section_is_not_inherited(self, env):
        document = b"[DEFAULT]\nrole_arn = arn:x\nregion = us-east-1\n[profile a]\n[b]\nregion = eu-west-1\n"
        provider = IniConfigProvider(document, env=env)

        assert provider.list_profiles(roles_only=True) == []
        assert dict(provider.config("a").raw_attributes) == {}
        assert provider.config("b").role_arn == ""
        assert dict(provider.config("b").raw_attributes) == {"region": "eu-west-1"}


class TestEnvConfigProvider:
    """EnvConfigProvider tests"""

    def test_empty_environment(self):
        config = EnvConfigProvider({}).config()
        assert config.profile == ""
        assert config.region == ""
        assert config.duration_seconds == 0
        assert dict(config.raw_attributes) == {}

    def test_profile_and_region(self):
        config = EnvConfigProvider({"AWS_PROFILE": "pfile", "AWS_REGION": "us-east-2"}).config()
        assert config.profile == "pfile"
        assert config.region == "us-east-2"
        assert config.get("region") == "us-east-2"
        assert "profile" not in config.raw_attributes

    def test_mfa(self):
        env = {
            "MFA_SERIAL": "arn:aws::iam:mfa/my-mfa",
            "EXTERNAL_ID": "ext-id-12345",
            "DURATION_SECONDS": "14400",
            "AWS_ROLE_SESSION_NAME": "session",
            "AWS_CA_BUNDLE": "/etc/ssl/bundle.pem",
        }
        config = EnvConfigProvider(env).config()
        assert config.mfa_serial == "arn:aws::iam:mfa/my-mfa"
        assert config.external_id == "ext-id-12345"
        assert config.duration_seconds == 14400
        assert config.role_session_name == "session"
        assert config.ca_bundle == "/etc/ssl/bundle.pem"

    def test_profile_argument_overrides(self):
        config = EnvConfigProvider({"AWS_PROFILE": "profile1"}).config("profile2")
        assert config.profile == "profile2"

    def test_credential_duration(self):
        config = EnvConfigProvider({"CREDENTIALS_DURATION": "10h10m10s"}).config()
        assert config.duration_seconds == 36610
        assert config.get("duration_seconds") == "36610"

    def test_duration_seconds_takes_precedence(self):
        env = {"DURATION_SECONDS": "900", "CREDENTIALS_DURATION": "1h"}
        assert EnvConfigProvider(env).config().duration_seconds == 900

    def test_bad_credential_duration(self):
        config = EnvConfigProvider({"CREDENTIALS_DURATION": "forever"}).config()
        assert config.duration_seconds == 0
        assert "duration_seconds" not in config.raw_attributes

    def test_bad_duration_seconds(self):
        config = EnvConfigProvider({"DURATION_SECONDS": "lots"}).config()
        assert config.duration_seconds == 0

    def test_alternate_env_vars(self):
        assert EnvConfigProvider({"AWS_DEFAULT_REGION": "us-west-1"}).config().region == "us-west-1"

    def test_process_environment(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "ca-central-1")
        assert EnvConfigProvider().config().region == "ca-central-1"

    def test_list_profiles(self):
        provider = EnvConfigProvider({"AWS_PROFILE": "x"})
        assert provider.list_profiles() == []
        assert provider.list_profiles(roles_only=True) == []
