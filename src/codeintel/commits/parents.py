"""Decompose `git log --pretty='%H %P'` output into (child, parent) edges."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from codeintel.exceptions import MalformedInput

Edge = Tuple[str, str]

# Parent value marking a commit without parents (a root commit).
ROOT_PARENT = ""


def _line_edges(line: str, line_number: int) -> List[Edge]:
    if not line.strip():
        raise MalformedInput("empty commit line", line_number, line)

    child, *parents = line.split(" ")
    if not child or any(not parent for parent in parents):
        raise MalformedInput("empty field in commit line", line_number, line)

    if not parents:
        return [(child, ROOT_PARENT)]
    return [(child, parent) for parent in parents]


def flatten_commit_parents(lines: Iterable[str]) -> List[Edge]:
    """
    Flatten commit lines into a list of (child, parent) edges.

    Each line is ``<child> [parent ...]`` with fields separated by a single
    space. A line with parents yields one edge per parent in the order they
    appear; a line without parents yields a single ``(child, "")`` edge.

    Raises:
        MalformedInput: a line is empty, whitespace-only, or contains an
            empty field (leading, trailing, or repeated spaces). Nothing is
            returned in that case.
    """
    edges: List[Edge] = []
    for line_number, line in enumerate(lines, start=1):
        edges.extend(_line_edges(line, line_number))
    return edges


def flatten_log_output(output: str) -> List[Edge]:
    """
    Flatten raw command output, skipping empty lines such as the trailing one.

    Whitespace-only lines are still rejected, and ``MalformedInput`` reports
    the line number within ``output``.
    """
    edges: List[Edge] = []
    for line_number, line in enumerate(output.split("\n"), start=1):
        if line == "":
            continue
        edges.extend(_line_edges(line, line_number))
    return edges


__all__ = ["Edge", "ROOT_PARENT", "flatten_commit_parents", "flatten_log_output"]
