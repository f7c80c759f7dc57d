"""Request parameters, input checks and rate limit keys for guild requests."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

_NAME_MIN = 2
_NAME_MAX = 100


def _query(pairs: list[tuple[str, str]]) -> str:
    if not pairs:
        return ""
    return "?" + urlencode(pairs)


@dataclass
class GetGuildMembersParams:
    """Query parameters for listing guild members.

    ``after`` is the highest user id already seen; ``limit`` must be in [1, 1000].
    """

    after: int = 0
    limit: int = 0

    def validate(self) -> None:
        """Raise ValueError when the limit is out of range."""
        if self.limit > 1000 or self.limit < 1:
            raise ValueError(
                "limit value should be less than or equal to 1000, and 1 or more"
            )

    def query_string(self) -> str:
        """Return the URL query string, leaving out zero values."""
        pairs: list[tuple[str, str]] = []
        if self.after:
            pairs.append(("after", str(int(self.after))))
        if self.limit:
            pairs.append(("limit", str(self.limit)))
        return _query(pairs)


@dataclass
class BanMemberParams:
    """Query parameters for banning a member."""

    delete_message_days: int = 0  # number of days of messages to delete, 0-7
    reason: str = ""

    def validate(self) -> None:
        """Raise ValueError when the day count is outside [0, 7]."""
        if not 0 <= self.delete_message_days <= 7:
            raise ValueError(
                "DeleteMessageDays must be a value in the range of [0, 7], got "
                f"{self.delete_message_days}"
            )

    def query_string(self) -> str:
        """Return the URL query string, leaving out empty values."""
        pairs: list[tuple[str, str]] = []
        if self.delete_message_days:
            pairs.append(("delete_message_days", str(self.delete_message_days)))
        if self.reason:
            pairs.append(("reason", self.reason))
        return _query(pairs)


@dataclass
class PruneMembersParams:
    """Query parameters for counting or starting a member prune."""

    days: int = 0
    compute_prune_count: bool = False

    def validate(self) -> None:
        """Raise ValueError when fewer than one day is given."""
        if self.days < 1:
            raise ValueError(f"days must be at least 1, got {self.days}")

    def query_string(self) -> str:
        """Return the URL query string; both values are always present."""
        return _query(
            [
                ("days", str(self.days)),
                ("compute_prune_count", "true" if self.compute_prune_count else "false"),
            ]
        )


@dataclass
class UpdateGuildRolePositionsParams:
    """One entry of a role position update."""

    id: int = 0
    position: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for the entry."""
        return {"id": self.id, "position": self.position}


def _check_name(name: str, kind: str) -> None:
    if not name:
        raise ValueError(f"{kind} name is required")
    if not _NAME_MIN <= len(name.encode("utf-8")) <= _NAME_MAX:
        raise ValueError(
            f"{kind} name must be 2 or more characters and no more than 100 characters"
        )


def validate_guild_name(name: str) -> None:
    """Raise ValueError unless the guild name is 2 to 100 characters long."""
    _check_name(name, "guild")


def validate_channel_name(name: str) -> None:
    """Raise ValueError unless the channel name is 2 to 100 characters long."""
    _check_name(name, "channel")


def _field(role: Any, key: str) -> Any:
    if isinstance(role, Mapping):
        return role.get(key, 0)
    return getattr(role, key)


def new_update_guild_role_positions_params(
    roles: Iterable[Any],
) -> list[UpdateGuildRolePositionsParams]:
    """Build position update entries from roles carrying ``id`` and ``position``."""
    return [
        UpdateGuildRolePositionsParams(
            id=int(_field(role, "id") or 0), position=int(_field(role, "position") or 0)
        )
        for role in roles
    ]


def ratelimit_guild(id: int) -> str:
    """Rate limit key for a guild."""
    return f"g:{id}"


def ratelimit_guild_audit_logs(id: int) -> str:
    """Rate limit key for a guild's audit logs."""
    return ratelimit_guild(id) + ":a-l"


def ratelimit_guild_embed(id: int) -> str:
    """Rate limit key for a guild's embed."""
    return ratelimit_guild(id) + ":e"


def ratelimit_guild_vanity_url(id: int) -> str:
    """Rate limit key for a guild's vanity URL."""
    return ratelimit_guild(id) + ":vurl"


def ratelimit_guild_channels(id: int) -> str:
    """Rate limit key for a guild's channels."""
    return ratelimit_guild(id) + ":c"


def ratelimit_guild_members(id: int) -> str:
    """Rate limit key for a guild's members."""
    return ratelimit_guild(id) + ":m"


def ratelimit_guild_bans(id: int) -> str:
    """Rate limit key for a guild's bans."""
    return ratelimit_guild(id) + ":b"


def ratelimit_guild_roles(id: int) -> str:
    """Rate limit key for a guild's roles."""
    return ratelimit_guild(id) + ":r"


def ratelimit_guild_regions(id: int) -> str:
    """Rate limit key for a guild's voice regions."""
    return ratelimit_guild(id) + ":regions"


def ratelimit_guild_integrations(id: int) -> str:
    """Rate limit key for a guild's integrations."""
    return ratelimit_guild(id) + ":i"


def ratelimit_guild_invites(id: int) -> str:
    """Rate limit key for a guild's invites."""
    return ratelimit_guild(id) + ":inv"


def ratelimit_guild_prune(id: int) -> str:
    """Rate limit key for a guild's prune endpoint."""
    return ratelimit_guild(id) + ":p"


def ratelimit_guild_webhooks(id: int) -> str:
    """Rate limit key for a guild's webhooks."""
    return ratelimit_guild(id) + ":w"