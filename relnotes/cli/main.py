"""Main CLI entry point for relnotes."""

import json
import logging
import sys

import click
from pydantic import ValidationError

from .. import __version__
from ..commits import parse_git_tag
from ..config import get_config, create_sample_config
from ..github import dump_event_payload
from .render import render
from .compare import compare


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--config-file', '-c', help='Path to JSON configuration file')
@click.version_option(version=__version__, prog_name="relnotes")
@click.pass_context
def cli(ctx, debug, config_file):
    """relnotes - changelogs from conventional commits."""

    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = get_config(config_file)
    except ValidationError as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(1)

    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['logger'] = logging.getLogger('relnotes')


def config_with_overrides(ctx, **overrides):
    """Return the loaded config with command line values applied."""
    config = ctx.obj['config']
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return config.model_copy(update=overrides)


@cli.command('parse-tag')
@click.argument('ref')
def parse_tag(ref):
    """Print the tag name of a git ref such as refs/tags/v1.0.0."""
    tag = parse_git_tag(ref)
    if not tag:
        click.echo(f"Error: '{ref}' is not a tag", err=True)
        sys.exit(1)
    click.echo(tag)


@cli.command()
@click.option('--path', '-p', help='Event payload file (defaults to GITHUB_EVENT_PATH)')
@click.pass_context
def event(ctx, path):
    """Print the GitHub Actions event payload."""
    try:
        payload = dump_event_payload(path, ctx.obj['logger'])
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(json.dumps(payload, indent=2))


@cli.command()
@click.option('--path', '-p', default='relnotes.json', help='Path for the config file')
def init_config(path):
    """Create a sample configuration file."""
    try:
        create_sample_config(path)
    except OSError as e:
        click.echo(f"Error creating config file: {e}", err=True)
        sys.exit(1)

    click.echo(f"Sample configuration file created at: {path}")
    click.echo("Please edit the file and add your GitHub token and repository.")


@cli.command()
def version():
    """Show version information."""
    click.echo(f"relnotes version {__version__}")


cli.add_command(render)
cli.add_command(compare)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == '__main__':
    main()
