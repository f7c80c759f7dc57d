"""Guild members and bans."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional


def _snowflake(value: Any) -> int:
    if value is None or value == "":
        return 0
    return int(value)


def _user_id(user: Optional[dict[str, Any]]) -> int:
    if user is None:
        return 0
    return _snowflake(user.get("id"))


@dataclass
class Member:
    """A user's membership of a guild."""

    guild_id: int = 0
    user: Optional[dict[str, Any]] = None
    nick: str = ""
    roles: list[int] = field(default_factory=list)
    joined_at: str = ""
    deaf: bool = False
    mute: bool = False
    # kept for cached members, whose user object may be missing
    user_id: int = 0

    def __str__(self) -> str:
        username = self.nick
        if self.user is not None:
            username = self.user.get("username", "")
        member_id = self.user_id
        if not member_id and self.user is not None:
            member_id = _user_id(self.user)
        return f"member{{user:{username}, nick:{self.nick}, ID:{member_id}}}"

    def mention(self) -> str:
        """Mention text for the member, or the emphasised nick if no id is known."""
        if self.user_id:
            member_id = self.user_id
        elif self.user is not None:
            member_id = _user_id(self.user)
        else:
            return f"*{self.nick}*"
        return f"<@!{member_id}>"

    def deep_copy(self) -> "Member":
        """Return an independent copy of the member."""
        other = Member()
        self.copy_over_to(other)
        return other

    def copy_over_to(self, other: "Member") -> None:
        """Copy every field of this member onto another member."""
        if not isinstance(other, Member):
            raise TypeError("given object was not of type Member")
        other.guild_id = self.guild_id
        other.nick = self.nick
        other.roles = list(self.roles)
        other.joined_at = self.joined_at
        other.deaf = self.deaf
        other.mute = self.mute
        other.user_id = self.user_id
        if self.user is not None:
            other.user = copy.deepcopy(self.user)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Member":
        """Build a member from its JSON object."""
        user = data.get("user")
        return cls(
            guild_id=_snowflake(data.get("guild_id")),
            user=copy.deepcopy(user) if user is not None else None,
            nick=data.get("nick") or "",
            roles=[_snowflake(r) for r in data.get("roles") or []],
            joined_at=data.get("joined_at") or "",
            deaf=bool(data.get("deaf", False)),
            mute=bool(data.get("mute", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for the member, leaving out empty optional fields."""
        out: dict[str, Any] = {}
        if self.guild_id:
            out["guild_id"] = self.guild_id
        out["user"] = copy.deepcopy(self.user)
        if self.nick:
            out["nick"] = self.nick
        out["roles"] = list(self.roles)
        if self.joined_at:
            out["joined_at"] = self.joined_at
        out["deaf"] = self.deaf
        out["mute"] = self.mute
        return out


@dataclass
class PartialBan:
    """A ban as described by an audit log entry."""

    reason: str = ""
    banned_user_id: int = 0
    moderator_responsible_id: int = 0

    def __str__(self) -> str:
        return (
            f"mod{{{self.moderator_responsible_id}}} banned "
            f"member{{{self.banned_user_id}}}, reason: {self.reason}."
        )


@dataclass
class Ban:
    """A guild ban: the banned user and the reason."""

    reason: str = ""
    user: Optional[dict[str, Any]] = None

    def deep_copy(self) -> "Ban":
        """Return an independent copy of the ban."""
        other = Ban()
        self.copy_over_to(other)
        return other

    def copy_over_to(self, other: "Ban") -> None:
        """Copy every field of this ban onto another ban."""
        if not isinstance(other, Ban):
            raise TypeError("given object was not of type Ban")
        other.reason = self.reason
        if self.user is not None:
            other.user = copy.deepcopy(self.user)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ban":
        """Build a ban from its JSON object."""
        user = data.get("user")
        return cls(
            reason=data.get("reason") or "",
            user=copy.deepcopy(user) if user is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for the ban."""
        return {"reason": self.reason, "user": copy.deepcopy(self.user)}