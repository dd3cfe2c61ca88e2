import pytest

from gqlcore.social import USERS, Page, Resolver


def _names(users):
    return [u.name for u in users]


def test_user_lookup():
    assert Resolver().user(None, "0x02").name == "Harry Potter"


def test_unknown_user():
    with pytest.raises(LookupError, match="user with id=0x99 does not exist"):
        Resolver().user(None, "0x99")


def test_admin_default_role():
    assert Resolver().admin(None, "0x01").name == "Albus Dumbledore"


def test_admin_wrong_role():
    with pytest.raises(LookupError, match="user with id=0x02 and role=ADMIN does not exist"):
        Resolver().admin(None, "0x02")
    assert Resolver().admin(None, "0x02", "USER").id == "0x02"


def test_search():
    assert _names(Resolver().search(None, "Potter")) == ["Harry Potter"]
    assert Resolver().search(None, "") == USERS
    assert Resolver().search(None, "Voldemort") == []


def test_friends_without_page():
    harry = Resolver().user(None, "0x02")
    assert _names(harry.friends()) == ["Albus Dumbledore", "Hermione Granger", "Ronald Weasley"]


def test_friends_paged():
    harry = Resolver().user(None, "0x02")
    assert _names(harry.friends(Page(first=1, last=2))) == ["Hermione Granger"]
    assert harry.friends(Page(first=1)) == harry.friends()[1:]
    assert harry.friends(Page(last=0)) == harry.friends()
    assert harry.friends(Page(last=100)) == harry.friends()


def test_friends_first_too_large():
    harry = Resolver().user(None, "0x02")
    with pytest.raises(ValueError, match="not enough users"):
        harry.friends(Page(first=10))


@pytest.mark.parametrize("user_id", ["0x01", "0x02", "0x03", "0x04"])
def test_friendship_is_symmetric(user_id):
    user = Resolver().user(None, user_id)
    friends = user.friends()
    assert len(friends) > 0
    for friend in friends:
        assert user.id in [f.id for f in friend.friends()]