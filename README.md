# guildcord

Plain Python models and helpers for chat guilds ("servers"): guilds and
their channel, role, member and emoji lists, members, bans, emojis, guild
embeds, integrations, validated request parameters and rate-limit bucket keys.

It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install guildcord
```

## Modules

- `guildcord.emoji`: `Emoji`, with `mention()`, `link_to_guild()`,
  `deep_copy()`, `copy_over_to()`, `from_dict()` and `to_dict()`; and
  `valid_emoji_name()`, which rejects empty names and names containing `-`.
- `guildcord.member`: `Member` (with `mention()`, deep copying and dict
  conversion), `Ban` and `PartialBan`.
- `guildcord.integration`: `GuildEmbed`, `Integration` and
  `IntegrationAccount`, each with `from_dict()`, `to_dict()`, `deep_copy()`
  and `copy_over_to()`.
- `guildcord.params`: request parameter objects that check themselves with
  `validate()` and render URL query strings with `query_string()`:
  `GetGuildMembersParams` (limit 1 to 1000), `BanMemberParams` (0 to 7 days of
  messages), `PruneMembersParams` (at least 1 day); also
  `UpdateGuildRolePositionsParams` and
  `new_update_guild_role_positions_params()`, the name checks
  `validate_guild_name()` and `validate_channel_name()` (2 to 100 characters),
  and rate-limit keys such as `ratelimit_guild()` and
  `ratelimit_guild_members()`.
- `guildcord.guild`: `Guild` and `GuildUnavailable`. A guild keeps its
  channels ordered by id, and looks up members, roles, channels and emojis.
  Roles, channels, voice states and presences are held as plain dicts (or any
  object with the same attributes). An unavailable guild serialises as just
  its id and `unavailable` flag.

Look-ups that find nothing raise `LookupError`; bad parameters raise
`ValueError`; copying onto an object of the wrong type raises `TypeError`.

## Example

```python
from guildcord.emoji import Emoji
from guildcord.guild import Guild
from guildcord.params import BanMemberParams, PruneMembersParams, ratelimit_guild_members

emoji = Emoji(id=123, name="party", animated=True)
print(emoji.mention())  # <a:party:123>

guild = Guild.from_dict({"id": "41771983444115456", "name": "example"})
guild.add_channel({"id": 30, "name": "general"})
guild.add_channel({"id": 10, "name": "rules"})
print([c["id"] for c in guild.channels])  # [10, 30]

print(PruneMembersParams(days=7).query_string())  # ?days=7&compute_prune_count=false
print(ratelimit_guild_members(123))  # g:123:m

try:
    BanMemberParams(delete_message_days=8).validate()
except ValueError as error:
    print(error)
```

## What it does not do

guildcord only models data and prepares request details. It does not talk to
any server: there is no HTTP client, no gateway or event connection, no cache
and no command-line tool. Sending requests with the parameters and rate-limit
keys it produces is left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```