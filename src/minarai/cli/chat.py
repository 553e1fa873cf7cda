"""CLI: minarai chat, minarai send"""

import asyncio
import json

import click
from rich.console import Console

from minarai.models.events import LocalEvent

console = Console()

PRINTED_EVENTS = (
    LocalEvent.MESSAGE,
    LocalEvent.SYSTEM_MESSAGE,
    LocalEvent.OPERATOR_COMMAND,
    LocalEvent.SYNC_COMMAND,
    LocalEvent.LOGS,
)


def _make_client(debug: bool = False):
    from minarai.cli.main import _make_client
    return _make_client(debug)


def _run(coro):
    from minarai.cli.main import _run
    return _run(coro)


def _dump(data):
    from minarai.cli.main import _dump
    return _dump(data)


def _print_event(name: str, data) -> None:
    body = data.get("body", {}) if isinstance(data, dict) else {}
    if name == LocalEvent.MESSAGE and isinstance(body, dict) and "message" in body:
        console.print(f"[green]Bot:[/green] {body['message']}")
    else:
        console.print(f"[dim][{name}] {_dump(data)}[/dim]")


def _handle_line(client, line: str) -> bool:
    """Dispatch one REPL line. Returns False to quit."""
    if line in ("/quit", "/exit"):
        return False
    if line.startswith("/command"):
        parts = line.split(maxsplit=2)
        if len(parts) < 2:
            console.print("[yellow]usage: /command NAME [JSON][/yellow]")
            return True
        try:
            extra = json.loads(parts[2]) if len(parts) > 2 else None
        except json.JSONDecodeError as e:
            console.print(f"[red]Invalid JSON: {e}[/red]")
            return True
        client.send_command(parts[1], extra)
    elif line.startswith("/logs"):
        parts = line.split()
        client.get_logs(limit=int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else None)
    else:
        client.send(line)
    return True


@click.command("chat")
@click.option("--debug", is_flag=True, help="Log every envelope and event")
def chat_cmd(debug: bool):
    """Interactive chat. /command NAME [JSON], /logs [LIMIT], /quit."""

    async def _chat():
        client = _make_client(debug)
        for name in PRINTED_EVENTS:
            client.on(name, lambda data=None, _name=name: _print_event(_name, data))
        client.on(LocalEvent.DISCONNECTED, lambda: console.print("[yellow]Disconnected.[/yellow]"))

        with console.status("Connecting..."):
            joined = await client.wait_for(LocalEvent.JOINED, timeout=15.0)
        console.print(f"[dim]Joined as {_dump(joined)}[/dim]")
        console.print("[cyan]Type your message (Ctrl+C to exit)[/cyan]\n")
        try:
            while True:
                line = await asyncio.to_thread(click.prompt, "You", prompt_suffix=": ")
                if not _handle_line(client, line.strip()):
                    break
        except (KeyboardInterrupt, EOFError, click.Abort):
            pass
        finally:
            await client.disconnect()

    _run(_chat())


@click.command("send")
@click.argument("message")
@click.option("--wait", default=5.0, type=float, help="Seconds to wait for replies")
@click.option("--json-output", "--json", is_flag=True)
def send_cmd(message: str, wait: float, json_output: bool):
    """Send a one-shot message and print replies for a few seconds."""

    async def _send():
        client = _make_client()

        def on_event(name, data=None):
            if json_output:
                click.echo(json.dumps({"type": name, "data": data}, ensure_ascii=False, default=str))
            else:
                _print_event(name, data)

        for name in PRINTED_EVENTS:
            client.on(name, lambda data=None, _name=name: on_event(_name, data))

        await client.wait_for(LocalEvent.JOINED, timeout=15.0)
        envelope = client.send(message)
        if not json_output:
            console.print(f"[dim]Sent {envelope['id']}[/dim]")
        await asyncio.sleep(wait)
        await client.disconnect()

    _run(_send())
