"""
Command Line Interface

Derives facet channels from a record or a search against the configured index.
"""

import json
from typing import List

import click
import requests
from tqdm import tqdm

from .config import Config
from .covers import CoverRouter
from .models import Channel
from .providers import FacetsChannelProvider
from .search import ResultsManager, SolrSearchClient


def build_provider(config: Config):
    """Create a results manager and a configured provider from settings."""
    client = SolrSearchClient(**config.get_search_config())
    manager = ResultsManager.for_client(client, config.search_source, config.channel_rows)
    
    provider = FacetsChannelProvider(manager, config.get_provider_options())
    provider.set_provider_id(config.provider_id)
    if config.cover_base_url:
        provider.set_cover_router(CoverRouter(config.cover_base_url))
    return provider, manager


def stamp_channels(channels: List[Channel], provider_id: str) -> List[Channel]:
    for channel in channels:
        channel.provider_id = provider_id
    return channels


def echo_channels(channels: List[Channel], as_json: bool):
    if as_json:
        click.echo(json.dumps([channel.to_dict() for channel in channels], indent=2))
        return
    
    if not channels:
        click.echo("No channels found.")
        return
    
    for channel in channels:
        click.echo(f"\n📺 {channel.title} ({len(channel)} records)")
        for entry in channel.contents:
            click.echo(f"   {entry.id}: {entry.title}")


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, verbose):
    """facetchannels - facet-driven channel suggestions"""
    config = Config()
    if verbose:
        config.log_level = 'DEBUG'
    config.setup_logging()
    ctx.obj = config


@cli.command()
@click.argument('record_ids', nargs=-1, required=True)
@click.option('--json', 'as_json', is_flag=True, help='Print channels as JSON')
@click.pass_obj
def record(config, record_ids, as_json):
    """Derive channels from one or more records by id."""
    provider, manager = build_provider(config)
    
    channels = []
    ids = tqdm(record_ids, desc="Deriving channels") if len(record_ids) > 1 else record_ids
    try:
        for record_id in ids:
            lookup = manager.get(config.search_source)
            lookup.get_params().rows = 1
            lookup.get_params().add_filter(f"id:{record_id}")
            found = lookup.get_results()
            if not found:
                click.echo(f"⚠️  Record not found: {record_id}")
                continue
            channels.extend(provider.get_from_record(found[0]))
    except requests.exceptions.RequestException as e:
        raise click.ClickException(f"Search failed: {e}")
    
    echo_channels(stamp_channels(channels, provider.provider_id), as_json)


@cli.command()
@click.argument('query', default='*:*')
@click.option('--filter', 'filters', multiple=True, help='Active filter as field:value (repeatable)')
@click.option('--json', 'as_json', is_flag=True, help='Print channels as JSON')
@click.pass_obj
def search(config, query, filters, as_json):
    """Derive channels from the facets of a search."""
    provider, manager = build_provider(config)
    
    results = manager.get(config.search_source)
    params = results.get_params()
    params.query = query
    try:
        for expression in filters:
            params.add_filter(expression)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--filter')
    provider.configure_search_params(params)
    
    try:
        results.perform_and_process_search()
        if not as_json:
            click.echo(f"🔍 {results.get_result_total():,} records match '{query}'")
        channels = provider.get_from_search(results)
    except requests.exceptions.RequestException as e:
        raise click.ClickException(f"Search failed: {e}")
    
    echo_channels(stamp_channels(channels, provider.provider_id), as_json)


if __name__ == '__main__':
    cli()
