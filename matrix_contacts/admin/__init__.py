"""Access to the homeserver's administrative command line."""

from matrix_contacts.admin.client import SynadmClient
from matrix_contacts.admin.responses import parse_members, parse_rooms

__all__ = ["SynadmClient", "parse_members", "parse_rooms"]
