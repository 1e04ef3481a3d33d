"""Response models for synadm JSON output.

synadm has emitted two shapes for each query across versions, so both are
accepted: a flat list of single-field records, or an object wrapping a list
of plain strings.
"""

from __future__ import annotations

from pydantic import BaseModel, TypeAdapter, ValidationError
from loguru import logger

from matrix_contacts.errors import ResponseParseError


class RoomRecord(BaseModel):
    room_id: str


class JoinedRooms(BaseModel):
    joined_rooms: list[str]
    total: int | None = None


class MemberRecord(BaseModel):
    user_id: str


class RoomMembers(BaseModel):
    members: list[str]
    total: int | None = None


_room_records = TypeAdapter(list[RoomRecord])
_member_records = TypeAdapter(list[MemberRecord])


def _check_total(query: str, values: list[str], total: int | None) -> None:
    if total is not None and total != len(values):
        logger.debug(f"synadm {query} reported total={total} but listed {len(values)}")


def parse_rooms(body: str | bytes) -> list[str]:
    """Parse `synadm user rooms` output into room ids, in the order returned."""
    try:
        return [r.room_id for r in _room_records.validate_json(body)]
    except ValidationError as first:
        try:
            wrapped = JoinedRooms.model_validate_json(body)
        except ValidationError as second:
            raise ResponseParseError("user rooms", _shape_error(body, first, second)) from first
    _check_total("user rooms", wrapped.joined_rooms, wrapped.total)
    return wrapped.joined_rooms


def parse_members(body: str | bytes) -> list[str]:
    """Parse `synadm room members` output into user ids, in the order returned."""
    try:
        return [m.user_id for m in _member_records.validate_json(body)]
    except ValidationError as first:
        try:
            wrapped = RoomMembers.model_validate_json(body)
        except ValidationError as second:
            raise ResponseParseError("room members", _shape_error(body, first, second)) from first
    _check_total("room members", wrapped.members, wrapped.total)
    return wrapped.members


def _shape_error(body: str | bytes, as_list: ValidationError, as_object: ValidationError) -> str:
    """Describe the failure of whichever shape the body resembles."""
    text = body.decode("utf-8", "replace") if isinstance(body, bytes) else body
    exc = as_object if text.lstrip().startswith("{") else as_list
    err = exc.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
    return f"{loc}: {err.get('msg', 'invalid')}"
