"""Pydantic model for a rentable hotel room."""

from pydantic import BaseModel, ConfigDict, Field


class Room(BaseModel):
    """A room of the catalog.

    Rooms are never deleted, and category and price do not change once
    created. ``available`` is carried through the rooms file but search
    never reads it; availability always comes from the reservation ledger.
    """

    room_id: int = Field(description="Stable room number")
    category: str = Field(description="Free-form label, e.g. 'Standard', 'Deluxe', 'Suite'")
    price: float = Field(ge=0, description="Nightly price")
    available: bool = Field(default=True, description="Vestigial flag, never consulted")

    model_config = ConfigDict(frozen=True)

    def matches_category(self, category: str | None) -> bool:
        """Check the room against an optional category filter.

        Args:
            category: Category to match case-insensitively, or None for any

        Returns:
            True if the room passes the filter
        """
        if category is None:
            return True
        return self.category.lower() == category.lower()
