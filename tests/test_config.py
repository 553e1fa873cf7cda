"""CLI configuration loading."""

import json

from minarai.config import ClientConfig, load_config, save_config


def test_file_then_env(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"url": "https://file", "application_id": "from-file"}))
    cfg = load_config(path, environ={"MINARAI_APPLICATION_ID": "from-env", "MINARAI_TRANSPORTS": "websocket, polling"})
    assert cfg.url == "https://file"
    assert cfg.application_id == "from-env"
    assert cfg.transports == ["websocket", "polling"]


def test_missing_or_broken_file(tmp_path):
    assert load_config(tmp_path / "nope.json", environ={}) == ClientConfig()
    broken = tmp_path / "broken.json"
    broken.write_text("{")
    assert load_config(broken, environ={}) == ClientConfig()


def test_save_round_trip(tmp_path):
    path = tmp_path / "sub" / "config.json"
    save_config(ClientConfig(url="https://x", application_id="A"), path)
    assert json.loads(path.read_text()) == {"url": "https://x", "application_id": "A"}


def test_socketio_options():
    assert ClientConfig().socketio_options() == {}
    cfg = ClientConfig(socketio_path="/ws/socket.io", transports=["websocket"])
    assert cfg.socketio_options() == {"socketio_path": "/ws/socket.io", "transports": ["websocket"]}
