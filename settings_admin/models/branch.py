"""
Branch draft - editable form state for a branch
"""

from pydantic import BaseModel, Field

from ..domain.branch import Branch


class BranchDraft(BaseModel):
    """
    Draft of a branch as edited in the form.
    The name is the only required field; contact fields are free text.
    """

    name: str = Field(default="", description="Branch name, unique ignoring case")
    description: str = Field(default="", description="Optional description")

    # Contact
    address: str = Field(default="", description="Physical address")
    phone: str = Field(default="", description="Contact phone")
    email: str = Field(default="", description="Contact email")

    class Config:
        validate_assignment = True
        extra = "forbid"

    @classmethod
    def from_entity(cls, branch: Branch) -> "BranchDraft":
        """Seeds a draft with the current values of an existing branch."""
        return cls(
            name=branch.name,
            description=branch.description or "",
            address=branch.address or "",
            phone=branch.phone or "",
            email=branch.email or "",
        )

    def to_payload(self, partial: bool = False) -> dict:
        """Request body; with ``partial`` only explicitly set fields are sent."""
        return self.model_dump(exclude_unset=partial)
