"""Loading of INI formatted AWS config and credentials documents."""

import configparser
import io
import logging
import os
from pathlib import Path
from typing import IO, List, Mapping, Optional, Tuple, Union
from urllib.parse import unquote, urlsplit

import httpx

from .errors import ProfileNotFoundError, SourceUnreadableError
from .profile import (
    DEFAULT_PROFILE_NAME,
    PROFILE_PREFIX,
    resolve_profile,
    section_name,
)

logger = logging.getLogger(__name__)

# Environment variables overriding the default file locations
CONFIG_FILE_ENV_VAR = "AWS_CONFIG_FILE"
CREDENTIALS_FILE_ENV_VAR = "AWS_SHARED_CREDENTIALS_FILE"

HTTP_TIMEOUT = 10.0

Source = Union[str, os.PathLike, bytes, bytearray, IO]


def default_config_path() -> Path:
    return Path.home() / ".aws" / "config"


def default_credentials_path() -> Path:
    return Path.home() / ".aws" / "credentials"


# A section name no INI header can produce, so a literal [DEFAULT] is an
# ordinary section and no section inherits keys from it
_NO_DEFAULT_SECTION = "\n"


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None, default_section=_NO_DEFAULT_SECTION)
    # Keep attribute names exactly as written
    parser.optionxform = str
    return parser


class ProfileDocument:
    """An in-memory INI document holding one section per profile.

    Config files name non-default profiles ``profile <name>``; credentials
    files use the bare name. ``prefixed`` selects which convention applies.
    """

    def __init__(
        self,
        parser: configparser.ConfigParser,
        path: Optional[Path] = None,
        prefixed: bool = False,
        env: Optional[Mapping[str, str]] = None,
    ):
        self.parser = parser
        self.path = path
        self.prefixed = prefixed
        self.env = os.environ if env is None else env

    def sections(self) -> List[str]:
        """Section names in file order."""
        return self.parser.sections()

    def find_section(self, profile: str) -> Optional[str]:
        """Return the section name holding a profile, or None.

        The bare name is tried first; in a prefixed document a non-default
        profile is retried as ``profile <name>``.
        """
        if self.parser.has_section(profile):
            return profile

        if self.prefixed and profile != DEFAULT_PROFILE_NAME:
            alternate = f"{PROFILE_PREFIX}{profile}"
            if self.parser.has_section(alternate):
                logger.debug(f"Profile '{profile}' found as section '{alternate}'")
                return alternate

        return None

    def profile(self, profile: Optional[str] = None) -> configparser.SectionProxy:
        """Get the section for a profile.

        Args:
            profile: Profile name; empty or None resolves via AWS_PROFILE,
                AWS_DEFAULT_PROFILE, then "default"

        Raises:
            ProfileNotFoundError: If no naming form of the profile exists
        """
        name = resolve_profile(profile, self.env)
        section = self.find_section(name)
        if section is None:
            raise ProfileNotFoundError(name)
        return self.parser[section]

    def ensure_profile(self, profile: str) -> configparser.SectionProxy:
        """Get the section for a profile, creating it when absent."""
        section = self.find_section(profile)
        if section is None:
            section = section_name(profile) if self.prefixed else profile
            logger.info(f"Creating section '{section}'")
            self.parser.add_section(section)
        return self.parser[section]

    def write(self, fp: IO[str]) -> None:
        """Write the document as INI text to a stream."""
        self.parser.write(fp)

    def save(self, path: Optional[Union[str, os.PathLike]] = None) -> Path:
        """Write the document to a file.

        Args:
            path: Destination (defaults to the path the document was loaded from)

        Returns:
            The path written to
        """
        target = Path(path).expanduser() if path else self.path
        if target is None:
            raise ValueError("No path to save the document to")

        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            self.write(f)
        logger.info(f"Saved {len(self.sections())} profile(s) to {target}")
        return target

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()


def _read_path(path: Path, source: object) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadableError(source, str(e)) from e


def _fetch_url(url: str) -> str:
    logger.debug(f"Fetching {url}")
    try:
        response = httpx.get(url, timeout=HTTP_TIMEOUT, follow_redirects=True)
    except httpx.HTTPError as e:
        raise SourceUnreadableError(url, str(e)) from e

    if not response.is_success:
        raise SourceUnreadableError(url, f"HTTP Response Code {response.status_code}")

    return response.text


def _decode(data: Union[bytes, bytearray], source: object) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceUnreadableError(source, str(e)) from e


def _read_source(source: Source) -> Tuple[str, Optional[Path]]:
    """Turn a source into INI text and, where it has one, a local path."""
    if isinstance(source, (bytes, bytearray)):
        return _decode(source, "<bytes>"), None

    if isinstance(source, os.PathLike):
        path = Path(source).expanduser()
        return _read_path(path, source), path

    if isinstance(source, str):
        parts = urlsplit(source)
        scheme = parts.scheme.lower()
        # A single letter scheme is a Windows drive, not a URL
        if not scheme or len(scheme) == 1:
            path = Path(source).expanduser()
            return _read_path(path, source), path
        if scheme == "file":
            path = Path(unquote(parts.path))
            return _read_path(path, source), path
        if scheme in ("http", "https"):
            return _fetch_url(source), None
        raise SourceUnreadableError(source, f"url scheme '{parts.scheme}' not supported")

    if hasattr(source, "read"):
        try:
            data = source.read()
        except OSError as e:
            raise SourceUnreadableError(source, str(e)) from e
        if isinstance(data, (bytes, bytearray)):
            data = _decode(data, source)
        name = getattr(source, "name", None)
        path = Path(name) if isinstance(name, str) else None
        return data, path

    raise SourceUnreadableError(source, f"unsupported source type {type(source).__name__}")


def load_document(
    source: Optional[Source] = None,
    default_path: Optional[Path] = None,
    prefixed: bool = False,
    env: Optional[Mapping[str, str]] = None,
) -> ProfileDocument:
    """Load an INI document from a path, URL, bytes or stream.

    With no source, ``default_path`` is read when it exists; otherwise the
    document starts with a single empty ``default`` section.

    Raises:
        SourceUnreadableError: If the source cannot be read or parsed
    """
    parser = _new_parser()

    if source is None:
        path = default_path
        if path is not None and path.exists():
            text = _read_path(path, path)
        else:
            logger.debug(f"No file at {path}, starting with an empty default profile")
            text = f"[{DEFAULT_PROFILE_NAME}]\n"
    else:
        text, path = _read_source(source)

    try:
        parser.read_string(text, source=str(path or "<source>"))
    except configparser.Error as e:
        raise SourceUnreadableError(source if source is not None else path, str(e)) from e

    logger.debug(f"Loaded {len(parser.sections())} section(s) from {path or 'in-memory source'}")
    return ProfileDocument(parser, path=path, prefixed=prefixed, env=env)


def load_config_file(
    source: Optional[Source] = None, env: Optional[Mapping[str, str]] = None
) -> ProfileDocument:
    """Load an AWS config file (``profile <name>`` section convention).

    With no source, AWS_CONFIG_FILE or ~/.aws/config is used.
    """
    env = os.environ if env is None else env
    if CONFIG_FILE_ENV_VAR in env:
        default_path = Path(env[CONFIG_FILE_ENV_VAR]).expanduser()
    else:
        default_path = default_config_path()
    return load_document(source, default_path, prefixed=True, env=env)


def load_credentials_file(
    source: Optional[Source] = None, env: Optional[Mapping[str, str]] = None
) -> ProfileDocument:
    """Load an AWS credentials file (bare section names).

    With no source, AWS_SHARED_CREDENTIALS_FILE or ~/.aws/credentials is used.
    """
    env = os.environ if env is None else env
    if CREDENTIALS_FILE_ENV_VAR in env:
        default_path = Path(env[CREDENTIALS_FILE_ENV_VAR]).expanduser()
    else:
        default_path = default_credentials_path()
    return load_document(source, default_path, prefixed=False, env=env)
