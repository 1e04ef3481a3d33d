"""Contact discovery: rooms -> members -> deduplicated contacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from loguru import logger

from matrix_contacts.admin.client import SynadmClient
from matrix_contacts.errors import AdminCommandError, ResponseParseError


@dataclass
class ContactReport:
    user: str
    rooms: list[str] = field(default_factory=list)
    contacts: list[str] = field(default_factory=list)
    failed_rooms: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "user": self.user,
            "rooms": self.rooms,
            "contacts": self.contacts,
            "failed_rooms": self.failed_rooms,
        }


def aggregate_contacts(user: str, member_lists: Iterable[Iterable[str]]) -> set[str]:
    """Union all member lists, dropping the queried user itself."""
    contacts: set[str] = set()
    for members in member_lists:
        contacts.update(m for m in members if m != user)
    return contacts


def fetch_members(
    client: SynadmClient, room_id: str, failed: list[str] | None = None
) -> list[str]:
    """
    Fetch one room's members.

    Returns an empty list when the query failed or its output could not be
    parsed, recording the room in `failed` if given, so one bad room does not
    hide the contacts reachable through the others. Launch failures are not
    caught.
    """
    try:
        return client.list_room_members(room_id)
    except AdminCommandError as e:
        logger.warning(f"Error executing {' '.join(e.argv)}: {e.stderr.strip()}")
    except ResponseParseError as e:
        logger.warning(f"Failed to parse JSON from synadm room members for {room_id}: {e.detail}")
    if failed is not None:
        failed.append(room_id)
    return []


def discover_contacts(client: SynadmClient, user: str) -> ContactReport:
    """
    List the user's rooms and collect everyone else in them.

    Room listing errors propagate; member listing errors skip the room.
    """
    report = ContactReport(user=user, rooms=client.list_user_rooms(user))
    if not report.rooms:
        return report

    member_lists = [fetch_members(client, room_id, report.failed_rooms) for room_id in report.rooms]

    report.contacts = sorted(aggregate_contacts(user, member_lists))
    logger.debug(
        f"{len(report.contacts)} contacts across {len(report.rooms)} rooms "
        f"({len(report.failed_rooms)} skipped)"
    )
    return report
