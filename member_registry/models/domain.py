# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Member(BaseModel):
    """A registered member. The repository stores a copy carrying the assigned ``id``."""
    id: Optional[int] = Field(
        default=None, frozen=True, description="Assigned by the repository on save"
    )
    name: str = Field(..., description="Member name, unique across the registry")
