"""
Integration tests against a real Minarai server.

Requires environment variables:
  MINARAI_URL             Socket.IO root URL
  MINARAI_APPLICATION_ID  application id
  MINARAI_IMAGE_URL       (optional) upload base URL

Run: MINARAI_INTEGRATION=1 pytest tests/integration/ -v
"""

import asyncio
import os

import pytest

from minarai import MinaraiClient
from minarai.transport import socketio

SKIP = not os.environ.get("MINARAI_INTEGRATION")
URL = os.environ.get("MINARAI_URL", "")
APPLICATION_ID = os.environ.get("MINARAI_APPLICATION_ID", "")
IMAGE_URL = os.environ.get("MINARAI_IMAGE_URL")

pytestmark = pytest.mark.skipif(SKIP, reason="MINARAI_INTEGRATION not set")


def make_client() -> MinaraiClient:
    client = MinaraiClient(socketio.connect, URL, APPLICATION_ID, image_url=IMAGE_URL, debug=True)
    client.initialize()
    return client


class TestConnectionLifecycle:
    @pytest.mark.asyncio
    async def test_joins_and_gets_server_identity(self):
        client = make_client()
        joined = await client.wait_for("joined", timeout=15.0)
        assert joined["applicationId"] == APPLICATION_ID
        assert client.identity.client_id == joined["clientId"]
        await client.disconnect()

    @pytest.mark.asyncio
    async def test_force_disconnect(self):
        client = make_client()
        await client.wait_for("joined", timeout=15.0)
        pending = asyncio.ensure_future(client.wait_for("disconnected", timeout=15.0))
        client.force_disconnect()
        await pending
        await client.disconnect()


class TestMessaging:
    @pytest.mark.asyncio
    async def test_send_gets_reply(self):
        client = make_client()
        await client.wait_for("joined", timeout=15.0)
        pending = asyncio.ensure_future(client.wait_for("message", timeout=30.0))
        client.send("こんにちは")
        reply = await pending
        assert "body" in reply
        await client.disconnect()

    @pytest.mark.asyncio
    async def test_get_logs(self):
        client = make_client()
        await client.wait_for("joined", timeout=15.0)
        pending = asyncio.ensure_future(client.wait_for("logs", timeout=15.0))
        client.get_logs(limit=5)
        assert await pending is not None
        await client.disconnect()


@pytest.mark.skipif(not IMAGE_URL, reason="MINARAI_IMAGE_URL not set")
class TestUpload:
    @pytest.mark.asyncio
    async def test_upload(self, tmp_path):
        path = tmp_path / "pixel.png"
        path.write_bytes(bytes.fromhex(
            "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
            "1f15c4890000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082"
        ))
        client = make_client()
        await client.wait_for("joined", timeout=15.0)
        result = await client.upload_attachment(path)
        assert "err" not in result
        await client.disconnect()
