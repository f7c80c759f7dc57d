"""Custom guild emoji objects."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional


def valid_emoji_name(name: str) -> bool:
    """Return whether a name is acceptable for a new emoji."""
    if not name:
        return False
    return "-" not in name


def _snowflake(value: Any) -> int:
    if value is None or value == "":
        return 0
    return int(value)


@dataclass
class Emoji:
    """A custom emoji; partial emojis use the same type."""

    id: int = 0
    name: str = ""
    roles: list[int] = field(default_factory=list)
    user: Optional[dict[str, Any]] = None  # the user who created the emoji
    require_colons: bool = False
    managed: bool = False
    animated: bool = False
    guild_id: int = 0

    def __str__(self) -> str:
        return f"emoji{{name:{self.name}, id:{self.id}}}"

    def mention(self) -> str:
        """Mention text for the emoji, with the animation prefix if animated."""
        prefix = "a:" if self.animated else ""
        return f"<{prefix}{self.name}:{self.id}>"

    def link_to_guild(self, guild_id: int) -> None:
        """Associate the emoji with a guild."""
        self.guild_id = guild_id

    def deep_copy(self) -> "Emoji":
        """Return an independent copy of the emoji."""
        other = Emoji()
        self.copy_over_to(other)
        return other

    def copy_over_to(self, other: "Emoji") -> None:
        """Copy every field of this emoji onto another emoji."""
        if not isinstance(other, Emoji):
            raise TypeError("given type is not Emoji")
        other.id = self.id
        other.name = self.name
        other.roles = list(self.roles)
        other.require_colons = self.require_colons
        other.managed = self.managed
        other.animated = self.animated
        other.guild_id = self.guild_id
        if self.user is not None:
            other.user = copy.deepcopy(self.user)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Emoji":
        """Build an emoji from its JSON object."""
        user = data.get("user")
        return cls(
            id=_snowflake(data.get("id")),
            name=data.get("name") or "",
            roles=[_snowflake(r) for r in data.get("roles") or []],
            user=copy.deepcopy(user) if user is not None else None,
            require_colons=bool(data.get("require_colons", False)),
            managed=bool(data.get("managed", False)),
            animated=bool(data.get("animated", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for the emoji, leaving out empty optional fields."""
        out: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.roles:
            out["roles"] = list(self.roles)
        if self.user is not None:
            out["user"] = copy.deepcopy(self.user)
        if self.require_colons:
            out["require_colons"] = True
        if self.managed:
            out["managed"] = True
        if self.animated:
            out["animated"] = True
        return out