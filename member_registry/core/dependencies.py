# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Dependency wiring — build the repository, then hand it to the service.
"""

from member_registry.core.config import settings
from member_registry.repositories.member_repository import (
    MemberRepository,
    MemoryMemberRepository,
)
from member_registry.services.member_service import MemberService

REPOSITORY_BACKENDS: dict[str, type[MemberRepository]] = {
    "memory": MemoryMemberRepository,
}


def build_member_repository(backend: str) -> MemberRepository:
    """Instantiate the repository for a backend key. Raises ValueError."""
    try:
        repo_cls = REPOSITORY_BACKENDS[backend]
    except KeyError:
        raise ValueError(
            f"Unknown member repository backend '{backend}'. "
            f"Expected one of: {', '.join(sorted(REPOSITORY_BACKENDS))}"
        ) from None
    return repo_cls()


# ── Singleton instances (one repository shared by the service) ──
_member_repo = build_member_repository(settings.MEMBER_REPOSITORY)
_member_service = MemberService(member_repo=_member_repo)


# ── FastAPI dependency functions ──
def get_member_repo() -> MemberRepository:
    return _member_repo


def get_member_service() -> MemberService:
    return _member_service
