# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports the member repositories."""
from member_registry.repositories.member_repository import (
    MemberRepository,
    MemoryMemberRepository,
)

__all__ = ["MemberRepository", "MemoryMemberRepository"]
