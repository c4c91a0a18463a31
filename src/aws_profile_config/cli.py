"""Command-line interface for AWS profile configuration."""

import json
import logging
from pathlib import Path
from typing import NoReturn, Optional

import click
import yaml

from .config.errors import AWSConfigError
from .config.loader import load_credentials_file, load_document
from .config.providers import EnvConfigProvider, IniConfigProvider
from .config.resolver import AWSConfigResolver
from .credentials.providers import EnvCredentialProvider, IniCredentialProvider
from .credentials.types import AWSCredentials


logger = logging.getLogger(__name__)


def _fail(e: Exception) -> NoReturn:
    click.echo(f"Error: {e}", err=True)
    raise click.exceptions.Exit(1)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
def main(debug: bool):
    """Resolve AWS config and credentials for named profiles."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@main.command()
@click.option('--config', '-c', default=None, help='Config file path or URL')
@click.option('--roles', is_flag=True, help='Only list profiles that assume a role')
def profiles(config: Optional[str], roles: bool):
    """List profiles in the AWS config file."""
    try:
        provider = IniConfigProvider(config)
        names = provider.list_profiles(roles_only=roles)
    except AWSConfigError as e:
        _fail(e)

    if names:
        for name in names:
            click.echo(name)
    else:
        click.echo("No AWS profiles found")


@main.command()
@click.argument('profile', required=False)
@click.option('--config', '-c', default=None, help='Config file path or URL')
@click.option('--no-default', is_flag=True, help='Do not merge the default profile')
@click.option('--no-source', is_flag=True, help='Do not merge the source_profile')
@click.option('--env', 'use_env', is_flag=True, help='Read configuration from environment variables')
@click.option('--format', 'output_format', type=click.Choice(['yaml', 'json']), default='yaml',
              help='Output format')
def resolve(profile: Optional[str], config: Optional[str], no_default: bool, no_source: bool,
            use_env: bool, output_format: str):
    """Print the merged configuration of a profile."""
    try:
        provider = EnvConfigProvider() if use_env else IniConfigProvider(config)
        resolver = AWSConfigResolver(
            provider,
            lookup_default_profile=not no_default,
            lookup_source_profile=not no_source,
        )
        resolved = resolver.resolve(profile)
    except AWSConfigError as e:
        _fail(e)

    data = resolved.to_dict()
    if output_format == 'json':
        click.echo(json.dumps(data, indent=2, sort_keys=True))
    else:
        click.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=True), nl=False)


@main.command()
@click.argument('profile', required=False)
@click.option('--credentials-file', '-f', default=None, help='Credentials file path or URL')
@click.option('--env', 'use_env', is_flag=True, help='Read credentials from environment variables')
def credentials(profile: Optional[str], credentials_file: Optional[str], use_env: bool):
    """Show which credentials a profile resolves to (secrets are not printed)."""
    try:
        if use_env:
            provider = EnvCredentialProvider()
        else:
            provider = IniCredentialProvider(credentials_file)
        creds = provider.credentials(profile)
    except AWSConfigError as e:
        _fail(e)

    click.echo(f"Access key ID: {creds.access_key_id}")
    click.echo(f"Session token: {'yes' if creds.session_token else 'no'}")


@main.command('set-credentials')
@click.argument('profile')
@click.option('--access-key-id', required=True, help='AWS access key ID')
@click.option('--secret-access-key', required=True, prompt=True, hide_input=True,
              help='AWS secret access key')
@click.option('--session-token', default='', help='AWS session token')
@click.option('--credentials-file', '-f', type=Path, default=None, help='Credentials file path')
def set_credentials(profile: str, access_key_id: str, secret_access_key: str,
                    session_token: str, credentials_file: Optional[Path]):
    """Store credentials for a profile in the credentials file."""
    try:
        if credentials_file:
            document = load_document(default_path=credentials_file.expanduser())
        else:
            document = load_credentials_file()
        provider = IniCredentialProvider(document=document)
        provider.update_credentials(
            profile,
            AWSCredentials(access_key_id, secret_access_key, session_token),
        )
        saved = document.save()
    except (AWSConfigError, ValueError, OSError) as e:
        _fail(e)

    click.echo(f"✓ Credentials for profile '{profile}' saved to {saved}")


if __name__ == "__main__":
    main()
