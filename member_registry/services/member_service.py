# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Member registration — the name-uniqueness rule on top of the repository.
"""

from typing import Optional

from member_registry.core.exceptions import DuplicateMemberError
from member_registry.core.logging import get_logger
from member_registry.metrics.prometheus import (
    DUPLICATE_REJECTIONS,
    MEMBER_LOOKUPS,
    MEMBERS_JOINED,
    STORE_SIZE,
)
from member_registry.models.domain import Member
from member_registry.repositories.member_repository import MemberRepository

logger = get_logger(__name__)


class MemberService:
    """Business logic for member registration.

    The repository is handed in at construction and fixed for the lifetime
    of the service.
    """

    def __init__(self, member_repo: MemberRepository) -> None:
        self._members = member_repo

    # ── Commands ──

    def join(self, member: Member) -> int:
        """Register a member and return its id. Raises DuplicateMemberError.

        The duplicate check and the save are not atomic: two callers joining
        the same name at once can both pass the check and both be stored.
        """
        self._validate_duplicate_member(member)
        saved = self._members.save(member)

        MEMBERS_JOINED.inc()
        STORE_SIZE.set(self._members.count())
        logger.info("Member joined: id=%d, name=%s", saved.id, saved.name)
        return saved.id

    def _validate_duplicate_member(self, member: Member) -> None:
        if self._members.find_by_name(member.name) is not None:
            DUPLICATE_REJECTIONS.inc()
            logger.warning("Duplicate member rejected: name=%s", member.name)
            raise DuplicateMemberError(member.name)

    # ── Queries ──

    def find_members(self) -> list[Member]:
        MEMBER_LOOKUPS.labels(kind="all").inc()
        return self._members.find_all()

    def find_one(self, member_id: int) -> Optional[Member]:
        MEMBER_LOOKUPS.labels(kind="id").inc()
        return self._members.find_by_id(member_id)
