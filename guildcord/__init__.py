"""Models and helpers for chat guilds, members, bans, emojis, integrations and request parameters."""

__version__ = "0.1.0"
__all__ = ["emoji", "guild", "integration", "member", "params"]