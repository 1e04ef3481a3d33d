"""Thin wrapper around the synadm command line."""

from __future__ import annotations

import subprocess

from loguru import logger

from matrix_contacts.admin.responses import parse_members, parse_rooms
from matrix_contacts.config.schema import AdminConfig
from matrix_contacts.errors import AdminCommandError, AdminLaunchError


class SynadmClient:
    """Runs synadm queries one at a time and decodes their JSON output."""

    def __init__(
        self,
        command: str = "synadm",
        args: list[str] | None = None,
        timeout: float | None = None,
    ):
        self.command = command
        self.args = args or []
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: AdminConfig) -> "SynadmClient":
        return cls(command=config.command, args=list(config.args), timeout=config.timeout)

    def list_user_rooms(self, user_id: str) -> list[str]:
        """Room ids the user has joined."""
        stdout = self._run("user", "rooms", user_id)
        logger.debug(f"{self.command} user rooms response: {stdout}")
        return parse_rooms(stdout)

    def list_room_members(self, room_id: str) -> list[str]:
        """User ids joined to the room."""
        return parse_members(self._run("room", "members", room_id))

    def _run(self, *query: str) -> str:
        argv = [self.command, *self.args, *query]
        logger.debug(" ".join(argv))

        try:
            # Lossy decode: bad bytes reach the JSON parser as U+FFFD.
            result = subprocess.run(
                argv,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise AdminCommandError(argv, None, f"no response after {self.timeout}s") from e
        except OSError as e:
            raise AdminLaunchError(argv, str(e)) from e

        if result.returncode != 0:
            raise AdminCommandError(argv, result.returncode, result.stderr or "")
        return result.stdout
