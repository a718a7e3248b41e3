"""Compare command implementation."""

import sys

import click

from ..changelog import CONTRIBUTORS_STYLES, generate_changelog
from ..github import GitHubClient, GitHubError
from .render import write_changelog


@click.command()
@click.option('--repository', '-r', help='GitHub repository as owner/name')
@click.option('--base', '-b', required=True, help='Base ref (previous release tag or commit)')
@click.option('--head', '-H', required=True, help='Head ref (new release tag or commit)')
@click.option('--style', type=click.Choice(CONTRIBUTORS_STYLES), help='Contributors presentation')
@click.option('--github-token', help='GitHub API token (overrides global setting)')
@click.option('--output', '-o', help='Write the changelog to a file instead of stdout')
@click.pass_context
def compare(ctx, repository, base, head, style, github_token, output):
    """Generate the changelog for the commits between two refs."""

    # Import here to avoid circular dependency
    from .main import config_with_overrides

    config = config_with_overrides(ctx, repository=repository, github_token=github_token)
    logger = ctx.obj['logger']

    if not config.repository:
        click.echo("Error: Repository is required. Use --repository, RELNOTES_REPOSITORY or config file", err=True)
        sys.exit(1)

    logger.info(f"Generating changelog for {config.repository}: {base}...{head}")

    client = GitHubClient(config, logger)
    try:
        records = client.collect_records(config.repository, base, head)
    except GitHubError as e:
        logger.error(f"Error fetching commits: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    changelog = generate_changelog(records, style or config.contributors_style, logger)
    try:
        write_changelog(changelog, output)
    except OSError as e:
        click.echo(f"Error writing to file {output}: {e}", err=True)
        sys.exit(1)
