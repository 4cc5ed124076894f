"""
Category draft - editable form state for a category
"""

from pydantic import BaseModel, Field

from ..domain.category import Category


class CategoryDraft(BaseModel):
    """
    Draft of a category as edited in the form.
    Only name, value and description are editable.
    """

    name: str = Field(default="", description="Display name")
    value: str = Field(default="", description="Unique machine-readable slug")
    description: str = Field(default="", description="Optional description")

    class Config:
        validate_assignment = True
        extra = "forbid"

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryDraft":
        """Seeds a draft with the current values of an existing category."""
        return cls(
            name=category.name,
            value=category.value,
            description=category.description or "",
        )

    def to_payload(self, partial: bool = False) -> dict:
        """Request body; with ``partial`` only explicitly set fields are sent."""
        return self.model_dump(exclude_unset=partial)
