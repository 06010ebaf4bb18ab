"""Command line entry point for codeintel."""

from __future__ import annotations

from typing import List, Optional, TextIO, Tuple

import click
import structlog

from codeintel.assignment.hash_routing import hash_bucket
from codeintel.assignment.shard_router import ShardRouter
from codeintel.commits.graph import CommitGraph
from codeintel.commits.parents import Edge, flatten_log_output
from codeintel.config.config import CodeIntelConfig
from codeintel.exceptions import CodeIntelError, MalformedInput
from codeintel.monitoring.metrics import COMMIT_EDGES, MALFORMED_COMMIT_LINES
from codeintel.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _flatten(log: TextIO) -> List[Edge]:
    try:
        edges = flatten_log_output(log.read())
    except MalformedInput:
        MALFORMED_COMMIT_LINES.inc()
        raise
    COMMIT_EDGES.inc(len(edges))
    return edges


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML config file (defaults to environment variables).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str]) -> None:
    """Shard hashing and commit graph tools."""
    try:
        config = (
            CodeIntelConfig.from_yaml(config_path)
            if config_path
            else CodeIntelConfig.from_env()
        )
        configure_logging(level=config.log_level, json_output=config.json_logs)
    except CodeIntelError as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = config


@cli.command("hash")
@click.argument("key")
@click.option("--buckets", "-n", type=int, required=True, help="Number of buckets.")
def hash_cmd(key: str, buckets: int) -> None:
    """Print the bucket KEY hashes to."""
    try:
        click.echo(hash_bucket(key, buckets))
    except CodeIntelError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("keys", nargs=-1, required=True)
@click.option(
    "--addr",
    "addrs",
    multiple=True,
    help="Shard address, repeat in shard order (defaults to config).",
)
@click.pass_obj
def route(config: CodeIntelConfig, keys: Tuple[str, ...], addrs: Tuple[str, ...]) -> None:
    """Print the shard address each KEY routes to."""
    try:
        router = ShardRouter(addrs) if addrs else config.build_router()
        for key in keys:
            click.echo(f"{key}\t{router.addr_for(key)}")
    except CodeIntelError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("log", type=click.File("r"), default="-")
def flatten(log: TextIO) -> None:
    """Print child/parent edges for commit LOG lines (`%H %P` format)."""
    try:
        edges = _flatten(log)
    except CodeIntelError as exc:
        raise click.ClickException(str(exc)) from exc
    for child, parent in edges:
        click.echo(f"{child}\t{parent}")


@cli.command()
@click.argument("commit")
@click.argument("log", type=click.File("r"), default="-")
@click.option(
    "--indexed",
    "indexed",
    multiple=True,
    required=True,
    help="Commit that has an index; repeat for each.",
)
@click.option(
    "--max-distance",
    type=int,
    default=None,
    help="Maximum number of edges to walk (defaults to config).",
)
@click.pass_obj
def nearest(
    config: CodeIntelConfig,
    commit: str,
    log: TextIO,
    indexed: Tuple[str, ...],
    max_distance: Optional[int],
) -> None:
    """Print the indexed commit nearest to COMMIT in the commit LOG."""
    if max_distance is None:
        max_distance = config.max_traversal_distance

    with structlog.contextvars.bound_contextvars(commit=commit):
        try:
            graph = CommitGraph.from_edges(_flatten(log))
            result = graph.nearest(commit, set(indexed), max_distance=max_distance)
        except CodeIntelError as exc:
            raise click.ClickException(str(exc)) from exc

        if result is None:
            logger.info("no_indexed_commit", max_distance=max_distance)
            raise click.ClickException(
                f"no indexed commit within {max_distance} edges of {commit}"
            )
        logger.debug("nearest_indexed_commit", found=result.commit, distance=result.distance)
        click.echo(f"{result.commit}\t{result.distance}")


if __name__ == "__main__":
    cli()
