"""CLI: minarai upload, minarai logs"""

import asyncio
import json
from typing import Optional

import click
from rich.console import Console

from minarai.errors import UploadNotConfiguredError
from minarai.models.events import LocalEvent

console = Console()


def _make_client(debug: bool = False):
    from minarai.cli.main import _make_client
    return _make_client(debug)


def _run(coro):
    from minarai.cli.main import _run
    return _run(coro)


@click.command("upload")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--extra", default=None, help="JSON sent as the `params` field")
def upload_cmd(path: str, extra: Optional[str]):
    """Upload an image attachment."""
    try:
        params = json.loads(extra) if extra else None
    except json.JSONDecodeError as e:
        raise click.BadParameter(str(e), param_hint="--extra")

    async def _upload():
        client = _make_client()
        try:
            await client.wait_for(LocalEvent.JOINED, timeout=15.0)
            with console.status("Uploading..."):
                result = await client.upload_attachment(path, extra=params)
        except UploadNotConfiguredError as e:
            console.print(f"[red]{e} Run `minarai config set image_url ...`.[/red]")
            raise SystemExit(1)
        finally:
            await client.disconnect()

        if "err" in result:
            console.print(f"[red]Upload failed: {result['err']}[/red]")
            raise SystemExit(1)
        if "result" in result:
            console.print(f"[green]Uploaded:[/green] {result['result']['url']}")
        else:
            console.print(f"[yellow]Server reported an error:[/yellow] {result['error']}")

    _run(_upload())


@click.command("logs")
@click.option("--limit", default=None, type=int)
@click.option("--lt-date", default=None, help="Only logs older than this date")
def logs_cmd(limit: Optional[int], lt_date: Optional[str]):
    """Fetch past logs for this user."""

    async def _logs():
        client = _make_client()
        try:
            await client.wait_for(LocalEvent.JOINED, timeout=15.0)
            pending = asyncio.ensure_future(client.wait_for(LocalEvent.LOGS, timeout=15.0))
            client.get_logs(lt_date=lt_date, limit=limit)
            logs = await pending
        finally:
            await client.disconnect()
        click.echo(json.dumps(logs, indent=2, ensure_ascii=False, default=str))

    _run(_logs())
