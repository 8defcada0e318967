import pytest

from socialxml.social import Post, User, search_posts


@pytest.fixture
def posts():
    return [
        Post("Solar panels are getting cheaper", ["solar_energy", "economy"]),
        Post("Sports news of the day", ["sports"]),
        Post("A quiet evening", ["Solar_Energy"]),
    ]


def test_search_by_body_word_ignores_case(posts):
    assert search_posts("SOLAR", "", posts) == [posts[0]]


def test_search_by_topic_ignores_case(posts):
    assert search_posts("", "solar_energy", posts) == [posts[0], posts[2]]


def test_topic_must_match_whole(posts):
    assert search_posts("", "solar", posts) == []


def test_word_matches_topic(posts):
    assert search_posts("sports", "", posts) == [posts[1]]


def test_empty_query_matches_nothing(posts):
    assert search_posts("", "", posts) == []


def test_user_holds_posts_and_followers(posts):
    user = User("1", "Ahmed", posts[:2], ["2", "3"])
    assert search_posts("", "sports", user.posts) == [posts[1]]
    assert user.follower_ids == ["2", "3"]
    assert User("2", "Yasser").posts == []