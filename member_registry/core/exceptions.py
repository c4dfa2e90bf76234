# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Domain errors raised by the service layer."""


class DuplicateMemberError(ValueError):
    """A member with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Member already exists: {name}")
        self.name = name
