"""Users and posts of the social network, and post search."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class Post:
    """A post: its body text and its topics."""

    body: str
    topics: list[str] = field(default_factory=list)


@dataclass
class User:
    """A user with posts and the ids of its followers."""

    id: str
    name: str
    posts: list[Post] = field(default_factory=list)
    follower_ids: list[str] = field(default_factory=list)


def _has_topic(post: Post, wanted: str) -> bool:
    wanted = wanted.casefold()
    return any(topic.casefold() == wanted for topic in post.topics)


def search_posts(word: str, topic: str, posts: Iterable[Post]) -> list[Post]:
    """Posts whose body contains word, or with a topic equal to word or topic.

    All comparisons ignore case; an empty word or topic matches nothing.
    """
    lowered_word = word.casefold()
    return [
        post
        for post in posts
        if (word and lowered_word in post.body.casefold())
        or (word and _has_topic(post, word))
        or (topic and _has_topic(post, topic))
    ]