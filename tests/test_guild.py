import pytest

from guildcord.emoji import Emoji
from guildcord.guild import Guild, GuildUnavailable
from guildcord.member import Member

SNOWFLAKES = [6, 65, 324, 5435, 63453, 111111111]


def _guild_with_reversed_channels():
    guild = Guild()
    for sid in reversed(SNOWFLAKES):
        guild.add_channel({"id": sid})
    return guild


def _member(uid, username="", nick=""):
    return Member(user={"id": uid, "username": username}, nick=nick)


def test_channel_sorting_many():
    guild = Guild()
    for i in range(1000, 0, -1):
        guild.add_channel({"id": i})
    assert [c["id"] for c in guild.channels] == list(range(1, 1001))


def test_add_channel_sorts():
    guild = _guild_with_reversed_channels()
    assert [c["id"] for c in guild.channels] == SNOWFLAKES


def test_delete_channel():
    guild = _guild_with_reversed_channels()
    target = SNOWFLAKES[3]
    guild.delete_channel({"id": target})
    with pytest.raises(LookupError):
        guild.channel(target)
    assert [c["id"] for c in guild.channels] == [6, 65, 324, 63453, 111111111]


def test_delete_missing_channel_raises():
    guild = _guild_with_reversed_channels()
    with pytest.raises(LookupError):
        guild.delete_channel_by_id(7)


def test_from_dict_and_round_trip():
    data = {
        "id": "41771983423143937",
        "name": "Discord Developers",
        "icon": "86e39f7ae3307e811784e2ffd11a7310",
        "splash": "",
        "owner_id": "80351110224678912",
        "region": "us-east",
        "afk_channel_id": "42072017402331136",
        "afk_timeout": 300,
        "verification_level": 1,
        "roles": [{"id": "41771983423143936", "name": "@everyone"}],
        "emojis": [{"id": "41771983429993937", "name": "LUL"}],
        "features": ["INVITE_SPLASH"],
        "mfa_level": 1,
        "unavailable": False,
        "member_count": 2,
        "channels": [{"id": "2", "name": "b"}, {"id": "1", "name": "a"}],
        "members": [{"user": {"id": "5", "username": "x"}, "roles": []}],
    }
    guild = Guild.from_dict(data)
    assert guild.id == 41771983423143937
    assert guild.afk_channel_id == 42072017402331136
    assert guild.roles[0]["id"] == 41771983423143936
    assert guild.emojis[0].name == "LUL"
    assert guild.member_count == 2
    again = Guild.from_dict(guild.to_dict())
    assert again.to_dict() == guild.to_dict()


def test_unavailable_marshal():
    guild = Guild.from_dict({"id": "41771983423143937", "unavailable": True})
    assert guild.unavailable is True
    assert guild.to_dict() == {"id": 41771983423143937, "unavailable": True}


def test_partial_and_from_unavailable():
    gu = GuildUnavailable.from_dict({"id": "12", "unavailable": True})
    guild = Guild.from_unavailable(gu)
    assert guild.id == 12
    assert guild.unavailable is True
    assert gu.to_dict() == {"id": 12, "unavailable": True}


def test_str():
    assert str(Guild(id=4, name="g")) == "g{4}"


def test_update_internals():
    guild = Guild(id=9, roles=[{"id": 1}], emojis=[Emoji(id=2)], channels=[{"id": 3}])
    guild.update_internals()
    assert guild.roles[0]["guild_id"] == 9
    assert guild.emojis[0].guild_id == 9
    assert guild.channels[0]["guild_id"] == 9


def test_member_with_highest_snowflake():
    assert Guild().member_with_highest_snowflake() is None
    guild = Guild(members=[_member(3), _member(10), _member(7)])
    assert guild.member_with_highest_snowflake().user["id"] == 10


def test_members():
    guild = Guild()
    guild.add_member(_member(1, "ann"))
    guild.add_members([_member(2, "bob", nick="ann"), None, _member(3, "cid")])
    assert len(guild.members) == 3
    assert guild.member(3).user["username"] == "cid"
    assert [m.user["id"] for m in guild.members_by_name("ann")] == [1, 2]
    with pytest.raises(LookupError):
        guild.member(99)
    with pytest.raises(ValueError):
        guild.add_member(None)


def test_roles():
    guild = Guild(id=5)
    for rid, name in [(1, "a"), (2, "b"), (3, "a")]:
        guild.add_role({"id": rid, "name": name})
    assert guild.roles[0]["guild_id"] == 5
    assert guild.role(2)["name"] == "b"
    assert [r["id"] for r in guild.roles_by_name("a")] == [1, 3]
    guild.delete_role_by_id(1)
    assert [r["id"] for r in guild.roles] == [3, 2]
    with pytest.raises(LookupError):
        guild.role(1)
    with pytest.raises(LookupError):
        guild.roles_by_name("zzz")


def test_emoji_lookup():
    guild = Guild(emojis=[Emoji(id=4, name="x")])
    assert guild.emoji(4).name == "x"
    with pytest.raises(LookupError):
        guild.emoji(5)


def test_deep_copy_is_independent():
    guild = Guild(
        id=1,
        name="g",
        application_id=8,
        joined_at="2018-01-01T00:00:00Z",
        roles=[{"id": 1, "name": "r"}],
        emojis=[Emoji(id=2)],
        members=[_member(3)],
        channels=[{"id": 4}],
        features=["A"],
    )
    clone = guild.deep_copy()
    assert clone.to_dict() == guild.to_dict()
    clone.roles[0]["name"] = "changed"
    clone.members[0].user["id"] = 77
    clone.features.append("B")
    assert guild.roles[0]["name"] == "r"
    assert guild.members[0].user["id"] == 3
    assert guild.features == ["A"]


def test_copy_over_to_wrong_type():
    with pytest.raises(TypeError):
        Guild().copy_over_to(Emoji())