"""Render command implementation."""

import json
import sys

import click
from pydantic import ValidationError

from ..changelog import CONTRIBUTORS_STYLES, CommitRecord, generate_changelog
from ..commits import build_record


def write_changelog(changelog, output):
    """Print the changelog or save it to a file."""
    if not changelog:
        click.echo("No changelog generated (no commits found)", err=True)

    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(changelog)
        click.echo(f"Changelog saved to: {output}", err=True)
    else:
        click.echo(changelog)


def load_records(path, github_format=False):
    """Load commit records from a JSON file.

    The file holds a list of records, or an object with a ``commits`` list.
    With ``github_format`` the items are GitHub compare API commits, each
    optionally carrying a ``pull_requests`` list.
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get('commits', [])

    if github_format:
        return [build_record(item, item.get('pull_requests')) for item in data]
    return [CommitRecord.model_validate(item) for item in data]


@click.command()
@click.option('--input', '-i', 'input_file', required=True, type=click.Path(exists=True, dir_okay=False),
              help='JSON file with commit records')
@click.option('--github-format', '-g', is_flag=True, help='Input holds raw GitHub compare API commits')
@click.option('--style', type=click.Choice(CONTRIBUTORS_STYLES), help='Contributors presentation')
@click.option('--output', '-o', help='Write the changelog to a file instead of stdout')
@click.pass_context
def render(ctx, input_file, github_format, style, output):
    """Render a changelog from commit records stored in a file."""
    config = ctx.obj['config']
    logger = ctx.obj['logger']

    try:
        records = load_records(input_file, github_format)
    except (OSError, ValueError, KeyError, ValidationError) as e:
        click.echo(f"Error loading commits from {input_file}: {e}", err=True)
        sys.exit(1)

    logger.info(f"Rendering changelog for {len(records)} commits")

    changelog = generate_changelog(records, style or config.contributors_style, logger)
    try:
        write_changelog(changelog, output)
    except OSError as e:
        click.echo(f"Error writing to file {output}: {e}", err=True)
        sys.exit(1)
