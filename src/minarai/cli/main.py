"""
Minarai CLI — `minarai` command.

Commands:
  minarai config show|set   Connection settings
  minarai chat              Interactive REPL chat
  minarai send <message>    One-shot message
  minarai upload <path>     Upload an image attachment
  minarai logs              Fetch past logs
"""

import asyncio
import json
from typing import Any

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install minarai-client[cli]")

from minarai.client import MinaraiClient
from minarai.config import load_config
from minarai.transport import socketio as socketio_transport

console = Console()


def _make_client(debug: bool = False) -> MinaraiClient:
    """Build a client from saved config. Call inside the running loop."""
    cfg = load_config()
    if not cfg.url or not cfg.application_id:
        console.print("[red]Not configured. Run `minarai config set url ...` and "
                      "`minarai config set application_id ...` first.[/red]")
        raise SystemExit(1)
    client = MinaraiClient(
        socketio_transport.connect,
        cfg.url,
        cfg.application_id,
        socketio_options=cfg.socketio_options(),
        image_url=cfg.image_url,
        client_id=cfg.client_id,
        user_id=cfg.user_id,
        device_id=cfg.device_id,
        lang=cfg.lang,
        debug=debug,
        silent=not debug,
    )
    client.initialize()
    return client


def _run(coro):
    return asyncio.run(coro)


def _dump(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, default=str)


@click.group()
@click.version_option("0.1.0")
def main():
    """Minarai CLI: talk to a Minarai bot from the terminal."""


# Register subcommands from separate modules
from minarai.cli.chat import chat_cmd, send_cmd
from minarai.cli.config import config
from minarai.cli.upload import logs_cmd, upload_cmd

main.add_command(config)
main.add_command(chat_cmd)
main.add_command(send_cmd)
main.add_command(upload_cmd)
main.add_command(logs_cmd)


if __name__ == "__main__":
    main()
