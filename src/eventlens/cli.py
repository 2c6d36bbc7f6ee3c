import asyncio
import json
import logging
import time
from pathlib import Path
from typing import Any, Awaitable, Callable

import click
import httpx
from rich.console import Console
from rich.logging import RichHandler

from eventlens.abi_events import AbiLoadError, make_signature_table_from_abi
from eventlens.clients.fourbyte import FourByteClient
from eventlens.clients.rpc import RPC, RPCError
from eventlens.core.config import DecodeTxConfig, ResolverConfig, RPCConfig
from eventlens.core.constants import BUILTIN_EVENT_SIGNATURES, FOURBYTE_EVENT_SIGNATURES_URL
from eventlens.core.interfaces import ILogsProvider
from eventlens.core.models import DecodedColumns, DecodedLog, RawLog
from eventlens.decoding.assembler import LogAssembler
from eventlens.decoding.resolver import SignatureResolver

console = Console()

LogsFetch = Callable[[ILogsProvider], Awaitable[list[RawLog]]]


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=False)],
    )


def _load_abi_tables(paths: tuple[Path, ...]) -> list[dict[str, str]]:
    tables = []
    for path in paths:
        try:
            tables.append(make_signature_table_from_abi(path))
        except AbiLoadError as e:
            raise click.BadParameter(str(e), param_hint="'--abi'") from e
    return tables


def _build_resolver(
    config: DecodeTxConfig, lookup: FourByteClient, abi_tables: list[dict[str, str]]
) -> SignatureResolver:
    resolver = SignatureResolver(lookup, config.resolver)
    if config.preload_builtin:
        resolver.preload(BUILTIN_EVENT_SIGNATURES)
    for table in abi_tables:
        resolver.preload(table)
    return resolver


def _render(decoded: list[DecodedLog]) -> None:
    for i, dl in enumerate(decoded):
        if dl.formatted_data is None:
            console.print(f"[bold]#{i}[/] [red]{dl.event_type}[/] {dl.address} topic0={dl.raw_topics[0] if dl.raw_topics else '-'}")
            continue
        console.print(f"[bold]#{i}[/] [green]{dl.event_type}[/] {dl.address}  [dim]{dl.event_signature}[/]")
        for name, value in dl.formatted_data.items():
            console.print(f"    {name} = {value}")


def _emit(config: DecodeTxConfig, raw_logs: list[RawLog], decoded: list[DecodedLog]) -> None:
    if config.json_out:
        click.echo(json.dumps([dl.to_dict() for dl in decoded], indent=2, default=str))
    else:
        _render(decoded)

    if config.parquet_out:
        import pyarrow.parquet as pq

        table = DecodedColumns.from_logs(raw_logs, decoded).to_arrow_table()
        pq.write_table(table, config.parquet_out, compression="zstd")
        console.print(f"[bold]wrote[/] {table.num_rows} rows → {config.parquet_out}")


async def _decode(
    config: DecodeTxConfig, fetch: LogsFetch, abi_tables: list[dict[str, str]]
) -> tuple[list[RawLog], list[DecodedLog]]:
    rpc = RPC(config.rpc.url, timeout_s=config.rpc.timeout_s, max_connections=config.rpc.max_connections)
    lookup = FourByteClient(config.resolver.url, timeout_s=config.resolver.timeout_s)
    try:
        raw_logs = await fetch(rpc)
        assembler = LogAssembler(_build_resolver(config, lookup, abi_tables))
        return raw_logs, await assembler.assemble_many(raw_logs)
    finally:
        await rpc.aclose()
        await lookup.aclose()


def _run(config: DecodeTxConfig, fetch: LogsFetch) -> None:
    abi_tables = _load_abi_tables(config.abi_paths)
    t0 = time.time()
    try:
        raw_logs, decoded = asyncio.run(_decode(config, fetch, abi_tables))
    except (RPCError, httpx.HTTPError) as e:
        raise click.ClickException(str(e)) from e

    _emit(config, raw_logs, decoded)
    if not config.json_out:
        unknown = sum(1 for dl in decoded if dl.formatted_data is None)
        console.print(
            f"[bold]done[/]: {len(decoded)} logs • "
            f"[green]decoded[/]={len(decoded) - unknown}  [red]unknown[/]={unknown} • {time.time() - t0:.2f}s"
        )


def _common_options(f: Any) -> Any:
    options = [
        click.option("--rpc", required=True, help="RPC endpoint URL"),
        click.option("--signatures-url", default=FOURBYTE_EVENT_SIGNATURES_URL, show_default=True,
                     help="Event-signature database endpoint"),
        click.option("--lookup-timeout", type=float, default=5.0, show_default=True,
                     help="Seconds before a signature lookup counts as unresolved"),
        click.option("--abi", "abi_paths", multiple=True, type=click.Path(exists=True, dir_okay=False, path_type=Path),
                     help="ABI JSON whose event names are preloaded; repeatable"),
        click.option("--builtin/--no-builtin", default=True, show_default=True,
                     help="Preload named ERC-20 Transfer/Approval signatures"),
        click.option("--json", "json_out", is_flag=True, help="Print decoded logs as JSON"),
        click.option("--parquet-out", default="", help="Optional path to write decoded logs as Parquet"),
        click.option("--log-level", default="WARNING", show_default=True,
                     type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False)),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def _make_config(
    rpc: str,
    signatures_url: str,
    lookup_timeout: float,
    abi_paths: tuple[Path, ...],
    builtin: bool,
    json_out: bool,
    parquet_out: str,
) -> DecodeTxConfig:
    return DecodeTxConfig(
        rpc=RPCConfig(url=rpc),
        resolver=ResolverConfig(url=signatures_url, timeout_s=lookup_timeout),
        abi_paths=tuple(abi_paths),
        preload_builtin=builtin,
        json_out=json_out,
        parquet_out=parquet_out,
    )


@click.group()
def cli() -> None:
    """eventlens: decode and label EVM event logs from unknown contracts."""


@cli.command("decode-tx")
@click.argument("tx_hash")
@_common_options
def decode_tx_cmd(
    tx_hash: str,
    rpc: str,
    signatures_url: str,
    lookup_timeout: float,
    abi_paths: tuple[Path, ...],
    builtin: bool,
    json_out: bool,
    parquet_out: str,
    log_level: str,
) -> None:
    """Decode every log of a transaction receipt."""
    _setup_logging(log_level)
    config = _make_config(rpc, signatures_url, lookup_timeout, abi_paths, builtin, json_out, parquet_out)
    _run(config, lambda client: client.get_transaction_logs(tx_hash))


@cli.command("decode-logs")
@click.option("--contract", required=True, help="Emitter contract address")
@click.option("--from-block", type=int, required=True)
@click.option("--to-block", type=int, required=True)
@click.option("--event", "events", multiple=True, help="Event topic0; repeat to OR (default: all)")
@_common_options
def decode_logs_cmd(
    contract: str,
    from_block: int,
    to_block: int,
    events: tuple[str, ...],
    rpc: str,
    signatures_url: str,
    lookup_timeout: float,
    abi_paths: tuple[Path, ...],
    builtin: bool,
    json_out: bool,
    parquet_out: str,
    log_level: str,
) -> None:
    """Decode the logs a contract emitted across a block range."""
    if from_block > to_block:
        raise click.UsageError("--from-block must be <= --to-block")
    _setup_logging(log_level)
    config = _make_config(rpc, signatures_url, lookup_timeout, abi_paths, builtin, json_out, parquet_out)
    _run(
        config,
        lambda client: client.get_logs(
            address=contract,
            from_block=from_block,
            to_block=to_block,
            topic0s=list(events) or None,
        ),
    )


if __name__ == "__main__":
    cli()
