import pytest
from fastapi.testclient import TestClient

from wallet_api.main import app
from wallet_api.middleware import request_context

client = TestClient(app)

WALLET = "0xe7995A5b1B41779DeA900E2204dc08110de363d5"


class _RecordingLogger:
    def __init__(self):
        self.records = []

    def _record(self, level):
        def emit(event, **fields):
            self.records.append((level, event, fields))
        return emit

    def __getattr__(self, level):
        return self._record(level)


@pytest.fixture
def request_log(monkeypatch):
    recorder = _RecordingLogger()
    monkeypatch.setattr(request_context, "logger", recorder)
    return recorder.records


def test_summary_names_resolved_wallet(stub_upstream, request_log):
    resp = client.post("/wallet/balance", json={"address": WALLET, "chainId": 137})

    assert resp.status_code == 200
    level, event, fields = request_log[-1]
    assert (level, event) == ("info", "wallet_request")
    assert fields["address"] == WALLET
    assert fields["chain_id"] == "137"
    assert fields["chain"] == "Polygon"
    assert fields["path"] == "/wallet/balance"
    assert fields["status"] == 200


def test_summary_without_wallet_body(request_log):
    client.get("/wallet/health")

    level, event, fields = request_log[-1]
    assert level == "info"
    assert "address" not in fields
    assert fields["method"] == "GET"


def test_rejected_request_logged_as_warning(stub_upstream, request_log):
    client.post("/wallet/info", json={"address": "0x123"})

    level, _, fields = request_log[-1]
    assert level == "warning"
    assert fields["status"] == 400
    assert "chain_id" not in fields


def test_upstream_failure_logged_as_error(stub_upstream, request_log):
    stub_upstream[0].error = RuntimeError("boom")

    client.post("/portfolio", json={"address": WALLET})

    level, _, fields = request_log[-1]
    assert level == "error"
    assert fields["status"] == 500
    assert fields["chain_id"] == "8453"


def test_request_id_generated_when_absent():
    resp = client.get("/wallet/health")

    assert len(resp.headers["x-request-id"]) == 8
