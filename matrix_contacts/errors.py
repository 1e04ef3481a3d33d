"""Errors raised while querying the administrative command line."""

from __future__ import annotations


class ContactsError(Exception):
    """Base class for matrix-contacts errors."""


class AdminLaunchError(ContactsError):
    """The admin command could not be started at all."""

    def __init__(self, argv: list[str], reason: str):
        self.argv = argv
        self.reason = reason
        super().__init__(f"Failed to execute {' '.join(argv)}: {reason}")


class AdminCommandError(ContactsError):
    """The admin command ran but did not succeed (non-zero exit or timeout)."""

    def __init__(self, argv: list[str], returncode: int | None, stderr: str):
        self.argv = argv
        self.returncode = returncode
        self.stderr = stderr
        status = "timed out" if returncode is None else f"exited with {returncode}"
        super().__init__(f"{' '.join(argv)} {status}: {stderr.strip()}")


class ResponseParseError(ContactsError):
    """The admin command's output matched none of the accepted shapes."""

    def __init__(self, query: str, detail: str):
        self.query = query
        self.detail = detail
        super().__init__(f"Failed to parse JSON from synadm {query}: {detail}")
