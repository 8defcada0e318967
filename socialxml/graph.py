"""Follower graph of users and the analyses run on it."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


class Graph:
    """Directed graph keyed by vertex id; each vertex lists its followers."""

    def __init__(self, vertex_ids: Iterable[str]) -> None:
        self._ids: list[str] = list(vertex_ids)
        self._adjacency: list[list[str]] = [[] for _ in self._ids]
        self._index: dict[str, int] = {}
        for position, vertex_id in enumerate(self._ids):
            self._index.setdefault(vertex_id, position)

    def _position(self, vertex_id: str) -> int:
        try:
            return self._index[vertex_id]
        except KeyError:
            raise KeyError(f"vertex not found: {vertex_id!r}") from None

    def add_edge(self, source: str, destination: str) -> None:
        """Append destination to the list of source; both must exist."""
        position = self._position(source)
        self._position(destination)
        self._adjacency[position].append(destination)

    def set_adjacency(self, vertex_id: str, adjacency: Iterable[str]) -> None:
        """Replace the list of a vertex."""
        self._adjacency[self._position(vertex_id)] = list(adjacency)

    def neighbours(self, vertex_id: str) -> list[str]:
        """A copy of the list of a vertex."""
        return list(self._adjacency[self._position(vertex_id)])

    def __str__(self) -> str:
        return "\n".join(
            f"Vertex {vertex_id} --> " + "".join(f"{n} " for n in adjacency)
            for vertex_id, adjacency in zip(self._ids, self._adjacency)
        )

    def most_influential_user(self) -> str | None:
        """The id that appears in the most lists, or None when all lists are empty."""
        counts = Counter(n for adjacency in self._adjacency for n in adjacency)
        best, best_count = None, 0
        for vertex_id, count in counts.items():
            if count > best_count:
                best, best_count = vertex_id, count
        return best

    def most_active_user(self) -> str | None:
        """The vertex with the longest list, or None when all lists are empty."""
        best, best_size = None, 0
        for vertex_id, adjacency in zip(self._ids, self._adjacency):
            if len(adjacency) > best_size:
                best, best_size = vertex_id, len(adjacency)
        return best

    def mutual_followers(self, user1: str, user2: str) -> list[str]:
        """Entries of user1's list that also appear in user2's list."""
        first = self._adjacency[self._position(user1)]
        second = self._adjacency[self._position(user2)]
        return [follower for follower in first if follower in second]

    def suggest_users_to_follow(self, user_id: str) -> list[str]:
        """Followers of the user's followers that the user does not have yet."""
        followers = self._adjacency[self._position(user_id)]
        suggestions: list[str] = []
        for follower in followers:
            position = self._index.get(follower)
            if position is None:
                continue
            suggestions.extend(
                candidate
                for candidate in self._adjacency[position]
                if candidate not in followers and candidate != user_id
            )
        return suggestions