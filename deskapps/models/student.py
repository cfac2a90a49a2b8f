"""Pydantic model for a student and their grades."""

from pydantic import BaseModel, Field


class Student(BaseModel):
    """A student with an ordered list of grades in [0, 100]."""

    name: str
    grades: list[float] = Field(default_factory=list)

    @property
    def average(self) -> float:
        """Mean grade, 0.0 without grades."""
        if not self.grades:
            return 0.0
        return sum(self.grades) / len(self.grades)

    @property
    def highest(self) -> float:
        return max(self.grades) if self.grades else 0.0

    @property
    def lowest(self) -> float:
        return min(self.grades) if self.grades else 0.0

    def has_name(self, name: str) -> bool:
        return self.name.lower() == name.lower()

    def render(self) -> str:
        return (
            f"Student: {self.name}\n"
            f"Grades: {self.grades}\n"
            f"Average: {self.average:.2f}\n"
            f"Highest: {self.highest:.2f}\n"
            f"Lowest: {self.lowest:.2f}\n"
        )
