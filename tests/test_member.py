import pytest

from guildcord.member import Ban, Member, PartialBan


def _member_data():
    return {
        "guild_id": "41771983444115456",
        "user": {"id": "80351110224678912", "username": "nelly"},
        "nick": "nel",
        "roles": ["1", "2"],
        "joined_at": "2015-04-26T06:26:56.936000+00:00",
        "deaf": False,
        "mute": True,
    }


def test_member_from_dict_parses_snowflakes():
    member = Member.from_dict(_member_data())
    assert member.guild_id == 41771983444115456
    assert member.roles == [1, 2]
    assert member.mute is True
    assert member.nick == "nel"


def test_member_round_trip():
    member = Member.from_dict(_member_data())
    again = Member.from_dict(member.to_dict())
    assert again == member


def test_member_to_dict_omits_empty_optionals():
    data = Member().to_dict()
    assert "guild_id" not in data
    assert "nick" not in data
    assert "joined_at" not in data
    assert data["roles"] == []


def test_mention_prefers_user_id():
    member = Member(user={"id": "5"}, user_id=123)
    assert member.mention() == "<@!123>"


def test_mention_falls_back_to_user():
    member = Member.from_dict(_member_data())
    assert member.mention() == "<@!80351110224678912>"


def test_mention_without_id_uses_nick():
    member = Member(nick="ghost")
    assert member.mention() == "*ghost*"


def test_member_str_uses_username_and_user_id():
    member = Member.from_dict(_member_data())
    assert str(member) == "member{user:nelly, nick:nel, ID:80351110224678912}"


def test_member_deep_copy_is_independent():
    member = Member.from_dict(_member_data())
    member.user_id = 7
    clone = member.deep_copy()
    assert clone == member
    clone.user["username"] = "changed"
    clone.roles.append(99)
    assert member.user["username"] == "nelly"
    assert member.roles == [1, 2]


def test_member_copy_over_to_wrong_type():
    with pytest.raises(TypeError):
        Member().copy_over_to(Ban())


def test_partial_ban_str():
    ban = PartialBan(reason="spam", banned_user_id=2, moderator_responsible_id=1)
    assert str(ban) == "mod{1} banned member{2}, reason: spam."


def test_ban_round_trip():
    data = {"reason": "mentioning b1nzy", "user": {"id": "53908232506183680", "username": "Mason"}}
    ban = Ban.from_dict(data)
    assert ban.reason == "mentioning b1nzy"
    assert ban.to_dict() == data


def test_ban_deep_copy_is_independent():
    ban = Ban(reason="r", user={"id": "1", "username": "a"})
    clone = ban.deep_copy()
    assert clone == ban
    clone.user["username"] = "b"
    assert ban.user["username"] == "a"


def test_ban_copy_over_to_wrong_type():
    with pytest.raises(TypeError):
        Ban().copy_over_to(Member())