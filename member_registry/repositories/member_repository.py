# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Member data access.
Encapsulates all read/write operations on member records.
NO business rules here — name uniqueness belongs to MemberService.
"""

import itertools
from abc import ABC, abstractmethod
from typing import Optional

from member_registry.models.domain import Member


class MemberRepository(ABC):
    """Storage contract for members. Backends are swappable."""

    @abstractmethod
    def save(self, member: Member) -> Member:
        """Store a copy of ``member`` under the next id and return that copy."""

    @abstractmethod
    def find_by_id(self, member_id: int) -> Optional[Member]:
        ...

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Member]:
        ...

    @abstractmethod
    def find_all(self) -> list[Member]:
        ...

    def count(self) -> int:
        return len(self.find_all())


class MemoryMemberRepository(MemberRepository):
    """In-memory member storage keyed by id. Not synchronized."""

    def __init__(self) -> None:
        self._store: dict[int, Member] = {}
        self._sequence = itertools.count(1)

    # ── Write ──

    def save(self, member: Member) -> Member:
        saved = member.model_copy(update={"id": next(self._sequence)})
        self._store[saved.id] = saved
        return saved

    # ── Read ──

    def find_by_id(self, member_id: int) -> Optional[Member]:
        return self._store.get(member_id)

    def find_by_name(self, name: str) -> Optional[Member]:
        # First match in insertion order wins if names ever collide.
        return next((m for m in self._store.values() if m.name == name), None)

    def find_all(self) -> list[Member]:
        return list(self._store.values())

    def count(self) -> int:
        return len(self._store)

    # ── Bulk / internal ──

    def clear_store(self) -> None:
        """Drop every record. The id sequence keeps counting."""
        self._store.clear()
