#!/usr/bin/env python3

import json
import logging
import sys

import click

from transient_cache import CacheConfig, StoreConfig, create_cache


def _build(store: str, url: str, prefix: str, serializer: str):
    config = CacheConfig(store=StoreConfig(type=store, url=url, prefix=prefix), serializer=serializer)
    return create_cache(config)


@click.group()
@click.option("--store", type=click.Choice(["memory", "redis"]), default="redis", show_default=True)
@click.option("--url", default="redis://localhost:6379/0", show_default=True, help="Redis URL")
@click.option("--prefix", default="transient", show_default=True)
@click.option("--serializer", type=click.Choice(["pickle", "json"]), default="json", show_default=True)
@click.option("-v", "--verbose", is_flag=True, help="Log store traffic")
@click.pass_context
def cli(ctx: click.Context, store: str, url: str, prefix: str, serializer: str, verbose: bool) -> None:
    """Poke at a transient cache from the shell. Values are JSON."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = _build(store, url, prefix, serializer)


@cli.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--ttl", type=int, default=None, help="Seconds until expiry (default: never)")
@click.pass_obj
def set_cmd(cache, key: str, value: str, ttl):
    try:
        decoded = json.loads(value)
    except ValueError:
        decoded = value
    ok = cache.set(key, decoded, ttl)
    click.echo("OK" if ok else "FAILED")
    sys.exit(0 if ok else 1)


@cli.command("get")
@click.argument("key")
@click.pass_obj
def get_cmd(cache, key: str):
    item = cache.pool.get_item(key)
    if not item.is_hit():
        click.echo("(miss)")
        sys.exit(1)
    click.echo(json.dumps(item.get()))


@cli.command("has")
@click.argument("key")
@click.pass_obj
def has_cmd(cache, key: str):
    click.echo("yes" if cache.has(key) else "no")


@cli.command("delete")
@click.argument("keys", nargs=-1, required=True)
@click.pass_obj
def delete_cmd(cache, keys):
    ok = cache.delete_multiple(keys)
    click.echo("OK" if ok else "PARTIAL")


if __name__ == "__main__":
    cli()
