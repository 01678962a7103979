"""CLI entry point for bb-webhooks."""

import json
from pathlib import Path

import click
from loguru import logger

from bitbucket_webhooks.client import Bitbucket
from bitbucket_webhooks.config import load_settings
from bitbucket_webhooks.errors import BitbucketError


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(lambda message: click.echo(message, err=True, nl=False), level="DEBUG" if verbose else "WARNING")


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _hook_params(description: str | None, url: str | None, events: tuple[str, ...], active: bool | None) -> dict:
    params = {"description": description, "url": url}
    if events:
        params["events"] = list(events)
    if active is not None:
        params["active"] = active
    # Unset required keys are left out so the required-key check names them.
    return {k: v for k, v in params.items() if v is not None}


def _run(call):
    try:
        return call()
    except BitbucketError as e:
        raise click.ClickException(str(e)) from e


hook_options = [
    click.option("--description", default=None, help="Webhook description."),
    click.option("--url", default=None, help="URL Bitbucket posts event payloads to."),
    click.option("--event", "events", multiple=True, help="Event key, e.g. repo:push. Repeatable."),
    click.option("--active/--inactive", default=None, help="Enable or disable the webhook."),
]


def with_hook_options(func):
    for option in reversed(hook_options):
        func = option(func)
    return func


@click.group()
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML settings file.")
@click.option("--owner", default=None, help="Repository owner (workspace).")
@click.option("--repo", default=None, help="Repository slug.")
@click.option("-v", "--verbose", is_flag=True, help="Log requests to stderr.")
@click.pass_context
def main(ctx, config_path: Path | None, owner: str | None, repo: str | None, verbose: bool):
    """Manage Bitbucket repository webhooks."""
    _configure_logging(verbose)
    try:
        settings = load_settings(config_path)
    except BitbucketError as e:
        raise click.ClickException(str(e)) from e
    client = Bitbucket(settings)
    ctx.obj = client.webhooks.with_context(owner or settings.owner, repo or settings.repo)


@main.command(name="list")
@click.option("--page", type=int, default=None, help="Page number.")
@click.option("--pagelen", type=int, default=None, help="Items per page.")
@click.option("--all", "all_pages", is_flag=True, help="Follow pagination and list every webhook.")
@click.pass_obj
def list_hooks(hooks, page: int | None, pagelen: int | None, all_pages: bool):
    """List webhooks of the repository."""
    params = {k: v for k, v in {"page": page, "pagelen": pagelen}.items() if v is not None}
    collection = _run(lambda: hooks.list(params=params, all_pages=all_pages))
    _echo_json(list(collection))


@main.command()
@click.argument("uuid")
@click.pass_obj
def get(hooks, uuid: str):
    """Show a single webhook."""
    _echo_json(_run(lambda: hooks.get(uuid=uuid)))


@main.command()
@with_hook_options
@click.pass_obj
def create(hooks, description: str | None, url: str | None, events: tuple[str, ...], active: bool | None):
    """Create a webhook."""
    params = _hook_params(description, url, events, active)
    _echo_json(_run(lambda: hooks.create(params=params)))


@main.command()
@click.argument("uuid")
@with_hook_options
@click.pass_obj
def edit(hooks, uuid: str, description: str | None, url: str | None, events: tuple[str, ...], active: bool | None):
    """Update a webhook."""
    params = _hook_params(description, url, events, active)
    _echo_json(_run(lambda: hooks.edit(uuid=uuid, params=params)))


@main.command()
@click.argument("uuid")
@click.pass_obj
def delete(hooks, uuid: str):
    """Delete a webhook."""
    _run(lambda: hooks.delete(uuid=uuid))
    click.echo(f"Deleted webhook {uuid}")
