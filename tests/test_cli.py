"""CLI commands that do not need a live server."""

import json

from click.testing import CliRunner

from minarai.cli import main as cli_main
from minarai.cli.chat import _handle_line


class RecordingClient:
    def __init__(self):
        self.calls = []

    def send(self, text):
        self.calls.append(("send", text))

    def send_command(self, name, extra=None):
        self.calls.append(("send_command", name, extra))

    def get_logs(self, lt_date=None, limit=None):
        self.calls.append(("get_logs", limit))


def test_repl_lines():
    client = RecordingClient()
    assert _handle_line(client, "hello") is True
    assert _handle_line(client, '/command open {"page": 2}') is True
    assert _handle_line(client, "/command") is True
    assert _handle_line(client, "/logs 5") is True
    assert _handle_line(client, "/quit") is False
    assert client.calls == [
        ("send", "hello"),
        ("send_command", "open", {"page": 2}),
        ("get_logs", 5),
    ]


def test_config_set_and_show(tmp_path, monkeypatch):
    for key in ("URL", "APPLICATION_ID"):
        monkeypatch.delenv(f"MINARAI_{key}", raising=False)
    path = tmp_path / "config.json"
    monkeypatch.setattr("minarai.config.CONFIG_FILE", path)

    runner = CliRunner()
    result = runner.invoke(cli_main.main, ["config", "set", "url", "https://socket.example.com"])
    assert result.exit_code == 0, result.output
    assert json.loads(path.read_text()) == {"url": "https://socket.example.com"}

    result = runner.invoke(cli_main.main, ["config", "set", "nope", "x"])
    assert result.exit_code != 0

    result = runner.invoke(cli_main.main, ["config", "show"])
    assert result.exit_code == 0, result.output
    assert "socket.example.com" in result.output
