"""
CLI configuration: ~/.minarai/config.json, overridden by MINARAI_* env vars.
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel

CONFIG_FILE = Path.home() / ".minarai" / "config.json"
ENV_PREFIX = "MINARAI_"


class ClientConfig(BaseModel):
    url: Optional[str] = None
    application_id: Optional[str] = None
    image_url: Optional[str] = None
    client_id: Optional[str] = None
    user_id: Optional[str] = None
    device_id: Optional[str] = None
    lang: Optional[str] = None
    socketio_path: Optional[str] = None
    transports: Optional[list[str]] = None

    def socketio_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self.socketio_path:
            options["socketio_path"] = self.socketio_path
        if self.transports:
            options["transports"] = self.transports
        return options


def _from_env(environ: dict[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for name in ClientConfig.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is None or raw == "":
            continue
        values[name] = [t.strip() for t in raw.split(",") if t.strip()] if name == "transports" else raw
    return values


def load_raw(path: Optional[Path] = None) -> dict[str, Any]:
    try:
        return json.loads((path or CONFIG_FILE).read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def load_config(path: Optional[Path] = None, environ: Optional[dict[str, str]] = None) -> ClientConfig:
    values = load_raw(path)
    values.update(_from_env(dict(os.environ) if environ is None else environ))
    return ClientConfig.model_validate(values)


def save_config(cfg: ClientConfig, path: Optional[Path] = None) -> None:
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(cfg.model_dump(exclude_none=True), indent=2))
