"""Server-wide settings: download filters and role credentials."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass, field

from vangogh.properties import OperatingSystem

ADMIN_ROLE = "admin"
SHARED_ROLE = "shared"

SEARCH_RESULTS_LIMIT = 60  # divisible by 2,3,4,5,6


@dataclass
class DownloadFilters:
    """Default filters applied to the downloads listed for a product."""

    operating_systems: list[OperatingSystem] = field(default_factory=list)
    language_codes: list[str] = field(default_factory=list)
    no_patches: bool = False


def _digest(value: str) -> bytes:
    return hashlib.sha256(value.encode("utf-8")).digest()


class Credentials:
    """Per-role username and password, kept as SHA-256 digests."""

    def __init__(self) -> None:
        self._usernames: dict[str, bytes] = {}
        self._passwords: dict[str, bytes] = {}

    def set_username(self, role: str, username: str) -> None:
        self._usernames[role] = _digest(username)

    def set_password(self, role: str, password: str) -> None:
        self._passwords[role] = _digest(password)

    def check(self, role: str, username: str, password: str) -> bool:
        """Return whether the username and password match those of role."""
        expected_user = self._usernames.get(role)
        expected_pass = self._passwords.get(role)
        if expected_user is None or expected_pass is None:
            return False
        user_ok = hmac.compare_digest(expected_user, _digest(username))
        pass_ok = hmac.compare_digest(expected_pass, _digest(password))
        return user_ok and pass_ok