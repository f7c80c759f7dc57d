"""Guild embeds and guild integrations."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Optional


def _snowflake(value: Any) -> int:
    if value is None or value == "":
        return 0
    return int(value)


@dataclass
class GuildEmbed:
    """The embed settings of a guild."""

    enabled: bool = False
    channel_id: int = 0

    def deep_copy(self) -> "GuildEmbed":
        """Return an independent copy of the embed."""
        other = GuildEmbed()
        self.copy_over_to(other)
        return other

    def copy_over_to(self, other: "GuildEmbed") -> None:
        """Copy every field of this embed onto another embed."""
        if not isinstance(other, GuildEmbed):
            raise TypeError("given object was not of type GuildEmbed")
        other.enabled = self.enabled
        other.channel_id = self.channel_id

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GuildEmbed":
        """Build an embed from its JSON object."""
        return cls(
            enabled=bool(data.get("enabled", False)),
            channel_id=_snowflake(data.get("channel_id")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for the embed."""
        return {"enabled": self.enabled, "channel_id": self.channel_id}


@dataclass
class IntegrationAccount:
    """The external account behind an integration."""

    id: str = ""
    name: str = ""

    def deep_copy(self) -> "IntegrationAccount":
        """Return an independent copy of the account."""
        other = IntegrationAccount()
        self.copy_over_to(other)
        return other

    def copy_over_to(self, other: "IntegrationAccount") -> None:
        """Copy every field of this account onto another account."""
        if not isinstance(other, IntegrationAccount):
            raise TypeError("given object was not of type IntegrationAccount")
        other.id = self.id
        other.name = self.name

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IntegrationAccount":
        """Build an account from its JSON object."""
        return cls(id=str(data.get("id") or ""), name=data.get("name") or "")

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for the account."""
        return {"id": self.id, "name": self.name}


@dataclass
class Integration:
    """A guild integration such as a streaming service subscription."""

    id: int = 0
    name: str = ""
    type: str = ""
    enabled: bool = False
    syncing: bool = False
    role_id: int = 0
    expire_behavior: int = 0
    expire_grace_period: int = 0
    user: Optional[dict[str, Any]] = None
    account: Optional[IntegrationAccount] = None

    def deep_copy(self) -> "Integration":
        """Return an independent copy of the integration."""
        other = Integration()
        self.copy_over_to(other)
        return other

    def copy_over_to(self, other: "Integration") -> None:
        """Copy every field of this integration onto another integration."""
        if not isinstance(other, Integration):
            raise TypeError("given object was not of type Integration")
        other.id = self.id
        other.name = self.name
        other.type = self.type
        other.enabled = self.enabled
        other.syncing = self.syncing
        other.role_id = self.role_id
        other.expire_behavior = self.expire_behavior
        other.expire_grace_period = self.expire_grace_period
        if self.user is not None:
            other.user = copy.deepcopy(self.user)
        if self.account is not None:
            other.account = self.account.deep_copy()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Integration":
        """Build an integration from its JSON object."""
        user = data.get("user")
        account = data.get("account")
        return cls(
            id=_snowflake(data.get("id")),
            name=data.get("name") or "",
            type=data.get("type") or "",
            enabled=bool(data.get("enabled", False)),
            syncing=bool(data.get("syncing", False)),
            role_id=_snowflake(data.get("role_id")),
            expire_behavior=int(data.get("expire_behavior") or 0),
            expire_grace_period=int(data.get("expire_grace_period") or 0),
            user=copy.deepcopy(user) if user is not None else None,
            account=IntegrationAccount.from_dict(account) if account is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for the integration."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "enabled": self.enabled,
            "syncing": self.syncing,
            "role_id": self.role_id,
            "expire_behavior": self.expire_behavior,
            "expire_grace_period": self.expire_grace_period,
            "user": copy.deepcopy(self.user),
            "account": self.account.to_dict() if self.account is not None else None,
        }