"""In-memory commit ancestry graph built from flattened parent edges."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Collection, Dict, Iterable, Iterator, List, Optional, Tuple

from codeintel.commits.parents import ROOT_PARENT, Edge, flatten_commit_parents
from codeintel.exceptions import InvalidArgument


@dataclass(frozen=True)
class NearestCommit:
    """
    Result of a nearest-commit query.

    Attributes:
        commit: Commit id found among the candidates
        distance: Number of edges walked from the starting commit
    """

    commit: str
    distance: int


class CommitGraph:
    """
    Parent/child adjacency over a set of commits.

    Edge order is preserved, so ``parents(c)[0]`` is the first parent of a
    merge commit. The graph is not modified after construction.
    """

    def __init__(
        self,
        parents: Dict[str, Tuple[str, ...]],
        children: Dict[str, Tuple[str, ...]],
    ) -> None:
        self._parents = parents
        self._children = children

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "CommitGraph":
        parents: Dict[str, List[str]] = {}
        children: Dict[str, List[str]] = {}

        for child, parent in edges:
            parents.setdefault(child, [])
            children.setdefault(child, [])
            if parent == ROOT_PARENT:
                continue
            parents.setdefault(parent, [])
            children.setdefault(parent, [])
            if parent not in parents[child]:
                parents[child].append(parent)
            if child not in children[parent]:
                children[parent].append(child)

        return cls(
            {commit: tuple(ps) for commit, ps in parents.items()},
            {commit: tuple(cs) for commit, cs in children.items()},
        )

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "CommitGraph":
        return cls.from_edges(flatten_commit_parents(lines))

    def __contains__(self, commit: object) -> bool:
        return commit in self._parents

    def __len__(self) -> int:
        return len(self._parents)

    def commits(self) -> List[str]:
        """All known commits in first-seen order."""
        return list(self._parents)

    def parents(self, commit: str) -> Tuple[str, ...]:
        return self._parents.get(commit, ())

    def children(self, commit: str) -> Tuple[str, ...]:
        return self._children.get(commit, ())

    def ancestors(self, commit: str) -> Iterator[str]:
        """Yield ancestors of a commit breadth-first, first parent first."""
        seen = {commit}
        queue = deque(self.parents(commit))
        while queue:
            current = queue.popleft()
            if current in seen:
                continue
            seen.add(current)
            yield current
            queue.extend(self.parents(current))

    def nearest(
        self,
        commit: str,
        candidates: Collection[str],
        max_distance: Optional[int] = None,
    ) -> Optional[NearestCommit]:
        """
        Find the candidate closest to ``commit`` walking parent and child edges.

        Parents are explored before children and in edge order, so among
        candidates at the same distance the one reached through the first
        parent wins.

        Args:
            commit: Starting commit; must be present in the graph
            candidates: Commits that qualify as a result (e.g. indexed ones)
            max_distance: Stop searching beyond this many edges (None = no limit)

        Returns:
            NearestCommit, or None when no candidate is reachable in range
        """
        if commit not in self:
            raise InvalidArgument(f"unknown commit: {commit}")
        if max_distance is not None and max_distance < 0:
            raise InvalidArgument("max_distance must be >= 0")

        seen = {commit}
        queue: deque[Tuple[str, int]] = deque([(commit, 0)])
        while queue:
            current, distance = queue.popleft()
            if current in candidates:
                return NearestCommit(commit=current, distance=distance)
            if max_distance is not None and distance >= max_distance:
                continue
            for neighbour in (*self.parents(current), *self.children(current)):
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append((neighbour, distance + 1))

        return None


__all__ = ["CommitGraph", "NearestCommit"]
