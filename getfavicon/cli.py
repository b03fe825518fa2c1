"""Entrypoint for the command line interface."""

import asyncio

import typer
import uvicorn

from getfavicon.configs import settings
from getfavicon.configs.app_configs.config_logging import configure_logging
from getfavicon.exceptions import CacheAdapterError, CacheMissError
from getfavicon.favicon.factory import (
    create_cache_adapter,
    create_favicon_http_client,
    create_resolver,
)
from getfavicon.favicon.models import ResolvedIcon
from getfavicon.utils.metrics import configure_metrics, get_metrics_client
from getfavicon.web.api import LIST_DIRECTORY_NOT_FOUND, LIST_UNKNOWN_ERROR

cli = typer.Typer(no_args_is_help=True, add_completion=False)

json_option = typer.Option(
    False,
    "--json",
    help="Print the whole favicon record as JSON instead of the data URI",
)

host_option = typer.Option(settings.web.host, "--host", help="Address to bind the server to")

port_option = typer.Option(settings.web.port, "--port", help="Port to bind the server to")


async def _resolve(domain: str) -> ResolvedIcon:
    await configure_metrics()
    http_client = create_favicon_http_client()
    cache_adapter = create_cache_adapter()
    try:
        resolver = create_resolver(http_client, get_metrics_client(), cache_adapter)
        return await resolver.resolve(domain)
    finally:
        await http_client.aclose()
        await cache_adapter.close()
        await get_metrics_client().close()


async def _list_entries() -> str:
    cache_adapter = create_cache_adapter()
    try:
        return "\n".join(await cache_adapter.keys())
    except CacheMissError:
        return LIST_DIRECTORY_NOT_FOUND
    except CacheAdapterError:
        return LIST_UNKNOWN_ERROR
    finally:
        await cache_adapter.close()


@cli.command("resolve")
def resolve(domain: str, as_json: bool = json_option):
    """Resolve the favicon of DOMAIN and print it."""
    icon = asyncio.run(_resolve(domain))
    typer.echo(icon.to_json(indent=2) if as_json else icon.data or "")


@cli.command("list")
def list_cached():
    """List the cached favicon records."""
    typer.echo(asyncio.run(_list_entries()))


@cli.command("serve")
def serve(host: str = host_option, port: int = port_option):
    """Run the HTTP service."""
    uvicorn.run("getfavicon.main:app", host=host, port=port, proxy_headers=True)


@cli.callback()
def setup():
    """CLI Entrypoint"""
    configure_logging()


if __name__ == "__main__":
    cli()
