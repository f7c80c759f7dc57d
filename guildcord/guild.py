"""Guilds: the collection of members, channels, roles and emojis of one server."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any, Optional

from guildcord.emoji import Emoji
from guildcord.member import Member


def _snowflake(value: Any) -> int:
    if value is None or value == "":
        return 0
    return int(value)


def _get(obj: Any, key: str, default: Any = None) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key, default)
    return getattr(obj, key, default)


def _set(obj: Any, key: str, value: Any) -> None:
    if isinstance(obj, MutableMapping):
        obj[key] = value
    else:
        setattr(obj, key, value)


def _id_of(obj: Any) -> int:
    return _snowflake(_get(obj, "id"))


def _entity(data: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a JSON object, turning its id into an integer."""
    out = copy.deepcopy(dict(data))
    if "id" in out:
        out["id"] = _snowflake(out["id"])
    return out


def _clone(obj: Any) -> Any:
    deep_copy = getattr(obj, "deep_copy", None)
    if callable(deep_copy):
        return deep_copy()
    return copy.deepcopy(obj)


def _plain(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return copy.deepcopy(obj)


def _member_user_id(member: Member) -> int:
    if member.user is None:
        return 0
    return _snowflake(member.user.get("id"))


@dataclass
class GuildUnavailable:
    """A partial guild that only tells whether the guild is reachable."""

    id: int = 0
    unavailable: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GuildUnavailable":
        """Build an unavailable guild from its JSON object."""
        return cls(
            id=_snowflake(data.get("id")),
            unavailable=bool(data.get("unavailable", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for the unavailable guild."""
        return {"id": self.id, "unavailable": self.unavailable}


@dataclass
class Guild:
    """A guild: an isolated collection of users and channels.

    Roles, channels, voice states and presences are kept as JSON objects;
    members and emojis use their own types.
    """

    id: int = 0
    application_id: int = 0
    name: str = ""
    icon: str = ""
    splash: str = ""
    owner: bool = False
    owner_id: int = 0
    permissions: int = 0
    region: str = ""
    afk_channel_id: int = 0
    afk_timeout: int = 0
    embed_enabled: bool = False
    embed_channel_id: int = 0
    verification_level: int = 0
    default_message_notifications: int = 0
    explicit_content_filter: int = 0
    roles: list[Any] = field(default_factory=list)
    emojis: list[Emoji] = field(default_factory=list)
    features: list[str] = field(default_factory=list)
    mfa_level: int = 0
    widget_enabled: bool = False
    widget_channel_id: int = 0
    system_channel_id: int = 0
    joined_at: Optional[str] = None
    large: bool = False
    unavailable: bool = False
    member_count: int = 0
    voice_states: list[Any] = field(default_factory=list)
    members: list[Member] = field(default_factory=list)
    channels: list[Any] = field(default_factory=list)
    presences: list[Any] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.name}{{{self.id}}}"

    @classmethod
    def new_partial(cls, id: int) -> "Guild":
        """A guild known only by id, marked unavailable."""
        return cls(id=id, unavailable=True)

    @classmethod
    def from_unavailable(cls, unavailable: GuildUnavailable) -> "Guild":
        """Turn an unavailable guild into a partial guild."""
        return cls.new_partial(unavailable.id)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Guild":
        """Build a guild from its JSON object."""
        joined = data.get("joined_at")
        return cls(
            id=_snowflake(data.get("id")),
            application_id=_snowflake(data.get("application_id")),
            name=data.get("name") or "",
            icon=data.get("icon") or "",
            splash=data.get("splash") or "",
            owner=bool(data.get("owner", False)),
            owner_id=_snowflake(data.get("owner_id")),
            permissions=int(data.get("permissions") or 0),
            region=data.get("region") or "",
            afk_channel_id=_snowflake(data.get("afk_channel_id")),
            afk_timeout=int(data.get("afk_timeout") or 0),
            embed_enabled=bool(data.get("embed_enabled", False)),
            embed_channel_id=_snowflake(data.get("embed_channel_id")),
            verification_level=int(data.get("verification_level") or 0),
            default_message_notifications=int(
                data.get("default_message_notifications") or 0
            ),
            explicit_content_filter=int(data.get("explicit_content_filter") or 0),
            roles=[_entity(r) for r in data.get("roles") or []],
            emojis=[Emoji.from_dict(e) for e in data.get("emojis") or []],
            features=list(data.get("features") or []),
            mfa_level=int(data.get("mfa_level") or 0),
            widget_enabled=bool(data.get("widget_enabled", False)),
            widget_channel_id=_snowflake(data.get("widget_channel_id")),
            system_channel_id=_snowflake(data.get("system_channel_id")),
            joined_at=joined if joined else None,
            large=bool(data.get("large", False)),
            unavailable=bool(data.get("unavailable", False)),
            member_count=int(data.get("member_count") or 0),
            voice_states=copy.deepcopy(list(data.get("voice_states") or [])),
            members=[Member.from_dict(m) for m in data.get("members") or []],
            channels=[_entity(c) for c in data.get("channels") or []],
            presences=copy.deepcopy(list(data.get("presences") or [])),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for the guild.

        An unavailable guild is written as a partial guild holding only its id.
        """
        if self.unavailable:
            return GuildUnavailable(id=self.id, unavailable=True).to_dict()

        out: dict[str, Any] = {
            "id": self.id,
            "application_id": self.application_id,
            "name": self.name,
            "icon": self.icon,
            "splash": self.splash,
        }
        if self.owner:
            out["owner"] = True
        out["owner_id"] = self.owner_id
        if self.permissions:
            out["permissions"] = int(self.permissions)
        out.update(
            {
                "region": self.region,
                "afk_channel_id": self.afk_channel_id,
                "afk_timeout": self.afk_timeout,
                "embed_enabled": self.embed_enabled,
                "embed_channel_id": self.embed_channel_id,
                "verification_level": self.verification_level,
                "default_message_notifications": self.default_message_notifications,
                "explicit_content_filter": self.explicit_content_filter,
                "roles": [_plain(r) for r in self.roles],
                "emojis": [e.to_dict() for e in self.emojis],
                "features": list(self.features),
                "mfa_level": self.mfa_level,
                "widget_enabled": self.widget_enabled,
                "widget_channel_id": self.widget_channel_id,
            }
        )
        if self.system_channel_id:
            out["system_channel_id"] = self.system_channel_id
        if self.joined_at is not None:
            out["joined_at"] = self.joined_at
        if self.large:
            out["large"] = True
        out["unavailable"] = self.unavailable
        if self.member_count:
            out["member_count"] = self.member_count
        if self.voice_states:
            out["voice_states"] = [_plain(v) for v in self.voice_states]
        if self.members:
            out["members"] = [m.to_dict() for m in self.members]
        if self.channels:
            out["channels"] = [_plain(c) for c in self.channels]
        if self.presences:
            out["presences"] = [_plain(p) for p in self.presences]
        return out

    def update_internals(self) -> None:
        """Link roles, emojis and channels to this guild's id."""
        for role in self.roles:
            _set(role, "guild_id", self.id)
        for emoji in self.emojis:
            emoji.guild_id = self.id
        for channel in self.channels:
            _set(channel, "guild_id", self.id)

    def member_with_highest_snowflake(self) -> Optional[Member]:
        """The member whose user id is highest, or None without members."""
        if not self.members:
            return None
        highest = self.members[0]
        for member in self.members:
            if _member_user_id(member) > _member_user_id(highest):
                highest = member
        return highest

    def _sort_channels(self) -> None:
        self.channels.sort(key=_id_of)

    def add_channel(self, channel: Any) -> None:
        """Add a channel locally, keeping channels ordered by id."""
        self.channels.append(channel)
        self._sort_channels()

    def delete_channel(self, channel: Any) -> None:
        """Remove a channel locally."""
        self.delete_channel_by_id(_id_of(channel))

    def delete_channel_by_id(self, id: int) -> None:
        """Remove the channel with the given id; LookupError if there is none."""
        index = -1
        for position, channel in enumerate(self.channels):
            if _id_of(channel) == id:
                index = position
        if index == -1:
            raise LookupError(f"channel with Snowflake{{{id}}} does not exist in cacheLink")
        del self.channels[index]

    def add_member(self, member: Optional[Member]) -> None:
        """Add a member locally; ValueError if the member is None."""
        if member is None:
            raise ValueError("member was nil")
        self.members.append(member)

    def add_members(self, members: Iterable[Optional[Member]]) -> None:
        """Add several members locally, skipping missing ones."""
        self.members.extend(m for m in members if m is not None)

    def add_role(self, role: Any) -> None:
        """Add a role locally and link it to this guild."""
        _set(role, "guild_id", self.id)
        self.roles.append(role)

    def member(self, id: int) -> Member:
        """The member with the given user id; LookupError if absent."""
        for member in self.members:
            if _member_user_id(member) == id:
                return member
        raise LookupError("member not found in guild")

    def members_by_name(self, name: str) -> list[Member]:
        """Members whose nickname or username equals ``name``."""
        return [
            m
            for m in self.members
            if m.nick == name or (m.user is not None and m.user.get("username") == name)
        ]

    def role(self, id: int) -> Any:
        """The role with the given id; LookupError if absent."""
        for role in self.roles:
            if _id_of(role) == id:
                return role
        raise LookupError("role not found in guild")

    def delete_role_by_id(self, id: int) -> None:
        """Remove the role with the given id; the last role takes its place."""
        for index, role in enumerate(self.roles):
            if _id_of(role) == id:
                self.roles[index] = self.roles[-1]
                self.roles.pop()
                return

    def roles_by_name(self, name: str) -> list[Any]:
        """Roles named ``name``; LookupError if there are none."""
        roles = [r for r in self.roles if _get(r, "name") == name]
        if not roles:
            raise LookupError("no roles were found in guild")
        return roles

    def channel(self, id: int) -> Any:
        """The channel with the given id; LookupError if absent."""
        for channel in self.channels:
            if _id_of(channel) == id:
                return channel
        raise LookupError("channel not found in guild")

    def emoji(self, id: int) -> Emoji:
        """The emoji with the given id; LookupError if absent."""
        for emoji in self.emojis:
            if emoji.id == id:
                return emoji
        raise LookupError("emoji not found in guild")

    def deep_copy(self) -> "Guild":
        """Return an independent copy of the guild."""
        other = Guild()
        self.copy_over_to(other)
        return other

    def copy_over_to(self, other: "Guild") -> None:
        """Copy this guild onto another, appending copies of its collections."""
        if not isinstance(other, Guild):
            raise TypeError("argument given is not a Guild type")
        other.id = self.id
        other.name = self.name
        other.owner = self.owner
        other.owner_id = self.owner_id
        other.permissions = self.permissions
        other.region = self.region
        other.afk_timeout = self.afk_timeout
        other.embed_enabled = self.embed_enabled
        other.embed_channel_id = self.embed_channel_id
        other.verification_level = self.verification_level
        other.default_message_notifications = self.default_message_notifications
        other.explicit_content_filter = self.explicit_content_filter
        other.features = list(self.features)
        other.mfa_level = self.mfa_level
        other.widget_enabled = self.widget_enabled
        other.widget_channel_id = self.widget_channel_id
        other.system_channel_id = self.system_channel_id
        other.large = self.large
        other.unavailable = self.unavailable
        other.member_count = self.member_count
        other.splash = self.splash

        if self.application_id:
            other.application_id = self.application_id
        if self.afk_channel_id:
            other.afk_channel_id = self.afk_channel_id
        if self.joined_at is not None:
            other.joined_at = self.joined_at

        other.roles.extend(_clone(r) for r in self.roles if r is not None)
        other.emojis.extend(e.deep_copy() for e in self.emojis if e is not None)
        other.voice_states.extend(_clone(v) for v in self.voice_states if v is not None)
        other.members.extend(m.deep_copy() for m in self.members if m is not None)
        other.channels.extend(_clone(c) for c in self.channels if c is not None)
        other.presences.extend(_clone(p) for p in self.presences if p is not None)