"""
Augmented binary search tree over cluster members.

Nodes are ordered by start instant and every node caches the largest
exclusive end found in its subtree, so a query can skip a whole left subtree
once that maximum falls at or before the query start. The tree is built once
per detection run from the start-sorted members, which keeps it balanced;
``insert`` is available for incremental use and does not rebalance.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Iterator, Optional, Sequence

from loadgrid.services.conflicts.models import ClusterMember


@dataclass
class _Node:
    member: ClusterMember
    max_end: datetime
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None

    @property
    def start(self) -> datetime:
        return self.member.start

    @property
    def end(self) -> datetime:
        return self.member.end

    def update(self) -> None:
        candidate = self.end
        if self.left is not None and self.left.max_end > candidate:
            candidate = self.left.max_end
        if self.right is not None and self.right.max_end > candidate:
            candidate = self.right.max_end
        self.max_end = candidate


class IntervalTree:
    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    @classmethod
    def build(cls, members: Iterable[ClusterMember]) -> "IntervalTree":
        tree = cls()
        ordered = sorted(members, key=lambda m: (m.start, m.index))
        tree._root = cls._build_balanced(ordered, 0, len(ordered))
        tree._size = len(ordered)
        return tree

    @classmethod
    def _build_balanced(
        cls,
        ordered: Sequence[ClusterMember],
        lo: int,
        hi: int,
    ) -> Optional[_Node]:
        if lo >= hi:
            return None
        mid = (lo + hi) // 2
        node = _Node(member=ordered[mid], max_end=ordered[mid].end)
        node.left = cls._build_balanced(ordered, lo, mid)
        node.right = cls._build_balanced(ordered, mid + 1, hi)
        node.update()
        return node

    def __len__(self) -> int:
        return self._size

    @property
    def max_end(self) -> Optional[datetime]:
        return self._root.max_end if self._root is not None else None

    def insert(self, member: ClusterMember) -> None:
        node = _Node(member=member, max_end=member.end)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if member.end > current.max_end:
                current.max_end = member.end
            if member.start < current.start:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def query(self, start: datetime, end: datetime) -> list[ClusterMember]:
        """Members whose ``[start, end)`` interval shares time with the given one."""
        found: list[ClusterMember] = []
        stack: list[_Node] = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            if node.start < end and node.end > start:
                found.append(node.member)
            if node.left is not None and node.left.max_end > start:
                stack.append(node.left)
            # right subtree keys are >= node.start
            if node.right is not None and node.start < end and node.right.max_end > start:
                stack.append(node.right)
        return found

    def __iter__(self) -> Iterator[ClusterMember]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.member
            node = node.right


__all__ = ["IntervalTree"]
