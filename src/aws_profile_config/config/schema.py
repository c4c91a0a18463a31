"""Attribute schema for AWS profile configuration and credentials.

Every supported attribute is declared once in a field table naming its INI key,
the environment variables that may carry it, and how its raw string value is
converted. Providers iterate these tables instead of inspecting record types.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Callable, Dict, Mapping, NamedTuple, Optional, Tuple


def to_str(value: str) -> str:
    return value


_LEADING_ZERO_OCTAL = re.compile(r"[+-]?0[0-7_]+")


def to_int(value: str) -> int:
    """Parse an integer attribute, falling back to 0 on bad input.

    Integer literal syntax applies: a ``0x``, ``0o`` or ``0b`` prefix selects
    the base and a bare leading zero means octal, so "010" is 8 and "08" is
    invalid.
    """
    text = value.strip()
    try:
        if _LEADING_ZERO_OCTAL.fullmatch(text):
            return int(text, 8)
        return int(text, 0)
    except ValueError:
        return 0


_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")

_UNIT_SECONDS = {
    "ns": Decimal("0.000000001"),
    "us": Decimal("0.000001"),
    "µs": Decimal("0.000001"),
    "μs": Decimal("0.000001"),
    "ms": Decimal("0.001"),
    "s": Decimal(1),
    "m": Decimal(60),
    "h": Decimal(3600),
}


def duration_to_seconds(expression: str) -> int:
    """Convert a duration expression such as "10h10m10s" to whole seconds.

    The accepted grammar is the one used by Go's time.ParseDuration: an
    optional sign followed by one or more decimal numbers, each with a unit
    (ns, us, ms, s, m, h). Fractional seconds are truncated.

    Raises:
        ValueError: If the expression is not a valid duration
    """
    text = expression.strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]

    if text == "0":
        return 0
    if not text:
        raise ValueError(f"invalid duration '{expression}'")

    total = Decimal(0)
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if not match:
            raise ValueError(f"invalid duration '{expression}'")
        try:
            total += Decimal(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        except InvalidOperation as e:
            raise ValueError(f"invalid duration '{expression}'") from e
        pos = match.end()

    return sign * int(total)


class EnvVar(NamedTuple):
    """A candidate environment variable, with an optional value converter."""
    name: str
    convert: Optional[Callable[[str], str]] = None


def _duration_env(value: str) -> str:
    return str(duration_to_seconds(value))


class AttributeField(NamedTuple):
    """One attribute of a record: where it lives and how it is parsed."""
    name: str
    ini_key: Optional[str]
    env_vars: Tuple[EnvVar, ...]
    parse: Callable[[str], object] = to_str


CONFIG_FIELDS: Tuple[AttributeField, ...] = (
    AttributeField("ca_bundle", "ca_bundle", (EnvVar("AWS_CA_BUNDLE"),)),
    AttributeField("credential_source", "credential_source", ()),
    AttributeField(
        "duration_seconds",
        "duration_seconds",
        (EnvVar("DURATION_SECONDS"), EnvVar("CREDENTIALS_DURATION", _duration_env)),
        to_int,
    ),
    AttributeField("external_id", "external_id", (EnvVar("EXTERNAL_ID"),)),
    AttributeField("mfa_serial", "mfa_serial", (EnvVar("MFA_SERIAL"),)),
    AttributeField("profile", None, (EnvVar("AWS_PROFILE"),)),
    AttributeField("region", "region", (EnvVar("AWS_REGION"), EnvVar("AWS_DEFAULT_REGION"))),
    AttributeField("role_arn", "role_arn", ()),
    AttributeField("role_session_name", "role_session_name", (EnvVar("AWS_ROLE_SESSION_NAME"),)),
    AttributeField("source_profile", "source_profile", ()),
)

CREDENTIAL_FIELDS: Tuple[AttributeField, ...] = (
    AttributeField(
        "access_key_id",
        "aws_access_key_id",
        (EnvVar("AWS_ACCESS_KEY_ID"), EnvVar("AWS_ACCESS_KEY")),
    ),
    AttributeField(
        "secret_access_key",
        "aws_secret_access_key",
        (EnvVar("AWS_SECRET_ACCESS_KEY"), EnvVar("AWS_SECRET_KEY")),
    ),
    AttributeField(
        "session_token",
        "aws_session_token",
        (EnvVar("AWS_SESSION_TOKEN"), EnvVar("AWS_SECURITY_TOKEN")),
    ),
)


def lookup_env(attribute: AttributeField, env: Mapping[str, str]) -> Optional[str]:
    """Return the value of the first candidate variable present in env.

    A candidate whose converter rejects the value is skipped.
    """
    for var in attribute.env_vars:
        if var.name not in env:
            continue
        value = env[var.name]
        if var.convert is not None:
            try:
                value = var.convert(value)
            except ValueError:
                continue
        return value
    return None


@dataclass(frozen=True)
class AWSConfig:
    """A profile's resolved configuration.

    The typed fields are a projection of ``raw_attributes``. A typed field
    given a non-empty value is written into the raw map; every other typed
    field is derived from it, so the two always agree.
    """
    ca_bundle: str = ""
    credential_source: str = ""
    duration_seconds: int = 0
    external_id: str = ""
    mfa_serial: str = ""
    profile: str = ""
    region: str = ""
    role_arn: str = ""
    role_session_name: str = ""
    source_profile: str = ""
    raw_attributes: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), repr=False, hash=False
    )

    def __post_init__(self):
        raw = dict(self.raw_attributes)
        for attribute in CONFIG_FIELDS:
            if attribute.ini_key is None:
                continue
            value = getattr(self, attribute.name)
            if value and value != attribute.parse(raw.get(attribute.ini_key, "")):
                raw[attribute.ini_key] = str(value)
            object.__setattr__(self, attribute.name, attribute.parse(raw.get(attribute.ini_key, "")))

        object.__setattr__(self, "raw_attributes", MappingProxyType(raw))

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str], profile: str = "") -> "AWSConfig":
        """Build a record from raw attributes and an owning profile name."""
        return cls(profile=profile, raw_attributes=attributes)

    def get(self, key: str, default: str = "") -> str:
        """Get a raw attribute value, including custom attributes."""
        return self.raw_attributes.get(key, default)

    def to_dict(self) -> Dict[str, object]:
        """Return the typed fields and any custom attributes as a plain dict."""
        data: Dict[str, object] = {a.name: getattr(self, a.name) for a in CONFIG_FIELDS}
        known = {a.ini_key for a in CONFIG_FIELDS if a.ini_key}
        for key, value in self.raw_attributes.items():
            if key not in known:
                data[key] = value
        return data
