import json
import subprocess
import sys

import pytest
from loguru import logger


class FakeSynadm:
    """Stands in for subprocess.run, answering synadm queries from a table."""

    def __init__(self):
        self.responses = {}
        self.calls = []

    def set(self, *query, body=None, returncode=0, stderr="", raises=None):
        if body is not None and not isinstance(body, (str, bytes)):
            body = json.dumps(body)
        self.responses[query] = (body or "", returncode, stderr, raises)

    def __call__(self, argv, capture_output=False, text=False, encoding=None, errors=None, timeout=None):
        self.calls.append(list(argv))
        self.decoding = (encoding, errors)
        query = tuple(argv[-3:])
        body, returncode, stderr, raises = self.responses.get(query, ("[]", 0, "", None))
        if raises is not None:
            raise raises
        if isinstance(body, bytes):
            body = body.decode(encoding or "utf-8", errors or "strict")
        return subprocess.CompletedProcess(argv, returncode, stdout=body, stderr=stderr)


@pytest.fixture
def synadm(monkeypatch):
    fake = FakeSynadm()
    monkeypatch.setattr("matrix_contacts.admin.client.subprocess.run", fake)
    return fake


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    monkeypatch.setenv("MATRIX_CONTACTS_HOME", str(tmp_path / "home"))
    for key in ("MATRIX_CONTACTS_ADMIN__COMMAND", "MATRIX_CONTACTS_LOGGING__LEVEL"):
        monkeypatch.delenv(key, raising=False)
    yield
    # CliRunner swaps stderr; drop any handler bound to it.
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
