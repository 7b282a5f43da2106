# tests/test_server.py
from __future__ import annotations

import http.client
import json
import threading

import pytest

from expense_bot.server import create_server
from tests.conftest import make_config


@pytest.fixture
def server(bot_context):
    config = make_config(HOST="127.0.0.1", PORT=0, WEBHOOK_PATH="/telegramBot")
    server = create_server(bot_context, config)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


def _request(server, method: str, path: str, body: bytes = b""):
    host, port = server.server_address[:2]
    conn = http.client.HTTPConnection(host, port, timeout=5)
    try:
        conn.request(method, path, body=body, headers={"Content-Type": "application/json"})
        response = conn.getresponse()
        return response.status, response.read()
    finally:
        conn.close()


def test_post_to_webhook_path_records_expense(server, ledger, sender):
    body = json.dumps({"message": {"text": "TT 20"}}).encode("utf-8")

    status, payload = _request(server, "POST", "/telegramBot", body)

    assert status == 202
    assert payload == b""
    assert ledger.rows[0][2] == "T&T Supermarket"
    assert sender.replies == ["done"]


def test_malformed_body_returns_400(server, sender):
    status, _ = _request(server, "POST", "/telegramBot", b"{oops")

    assert status == 400
    assert sender.sent == []


def test_other_paths_return_404(server, ledger):
    body = json.dumps({"message": {"text": "TT 20"}}).encode("utf-8")

    status, _ = _request(server, "POST", "/elsewhere", body)

    assert status == 404
    assert ledger.rows == []


def test_get_is_not_allowed(server):
    status, _ = _request(server, "GET", "/telegramBot")

    assert status == 405
