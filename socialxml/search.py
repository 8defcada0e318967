"""Search through the posts of users by topic or by body text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Flag, auto

from socialxml.social import User

_COMPLETION_LENGTH = 100
_SEPARATOR = "------------------------<br>"


class SearchMode(Flag):
    """What a search looks at: topic names, post bodies, or both."""

    TOPICS = auto()
    POSTS = auto()


@dataclass
class TopicDetails:
    """A topic with every post that carries it and the author of each post.

    ``original_topics`` holds the topic list of the last post seen with this topic.
    """

    topic: str
    original_topics: list[str] = field(default_factory=list)
    posts: list[str] = field(default_factory=list)
    users: list[User] = field(default_factory=list)


@dataclass
class PostDetails:
    """A post body with its topics and its author."""

    topics: list[str]
    user: User
    body: str


def unique_topics(users: Iterable[User]) -> list[TopicDetails]:
    """Group every post under each of its topics, in order of first appearance."""
    by_topic: dict[str, TopicDetails] = {}
    for user in users:
        for post in user.posts:
            for topic in post.topics:
                details = by_topic.get(topic)
                if details is None:
                    details = by_topic[topic] = TopicDetails(topic)
                details.posts.append(post.body)
                details.users.append(user)
                details.original_topics = list(post.topics)
    return list(by_topic.values())


def unique_posts(users: Iterable[User]) -> list[PostDetails]:
    """Every post of every user, with its author, in order."""
    return [
        PostDetails(list(post.topics), user, post.body)
        for user in users
        for post in user.posts
    ]


def format_post(number: int, topics: list[str], body: str, user: User) -> str:
    """HTML block that shows one numbered post."""
    first, *rest = topics or [""]
    parts = [
        f"<b><font size='5' color='DimGrey'>Post Number: {number}</font></b><br>",
        f"<b><font color='SlateGrey' size='4'>Topics: {first}</font></b>",
    ]
    parts.extend(
        f"<b><font color='SlateGrey' size='4'> - {topic}</font></b><br>" for topic in rest
    )
    parts.append(f"<b><font color='SlateGrey' size='4'>Post body:</font></b><br>{body}<br>")
    parts.append(
        "<font color='LightSlateGrey' size='2'><i>Author:</i></font>"
        f"<font color='LightSlateGrey' size='2'><i>{user.name} ({user.id})</i></font><br>"
    )
    parts.append(_SEPARATOR)
    return "".join(parts)


def _contains(haystack: str, needle: str) -> bool:
    return needle.casefold() in haystack.casefold()


class PostSearch:
    """Index of the posts of a set of users, searchable by topic or body."""

    def __init__(self, users: Iterable[User]) -> None:
        self.users: list[User] = list(users)
        self.topics: list[TopicDetails] = unique_topics(self.users)
        self.posts: list[PostDetails] = unique_posts(self.users)

    def completions(self, mode: SearchMode) -> list[str]:
        """Completion candidates: topic names, or the first 100 characters of each body."""
        if SearchMode.TOPICS in mode:
            return [details.topic for details in self.topics]
        return [details.body[:_COMPLETION_LENGTH] for details in self.posts]

    def matching_topics(self, text: str) -> list[TopicDetails]:
        """Topics whose name contains text, ignoring case."""
        return [details for details in self.topics if _contains(details.topic, text)]

    def matching_posts(self, text: str) -> list[PostDetails]:
        """Posts whose body contains text, ignoring case."""
        return [details for details in self.posts if _contains(details.body, text)]

    def render(self, text: str, mode: SearchMode) -> tuple[str, int]:
        """HTML of every matching post, numbered from 1, and the number of posts shown."""
        blocks: list[str] = []
        if SearchMode.TOPICS in mode:
            for details in self.matching_topics(text):
                for body, user in zip(details.posts, details.users):
                    blocks.append(
                        format_post(len(blocks) + 1, details.original_topics, body, user)
                    )
        if SearchMode.POSTS in mode:
            for details in self.matching_posts(text):
                blocks.append(
                    format_post(len(blocks) + 1, details.topics, details.body, details.user)
                )
        return "".join(blocks), len(blocks)