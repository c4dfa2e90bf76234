# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service package — re-exports MemberService."""
from member_registry.services.member_service import MemberService

__all__ = ["MemberService"]
