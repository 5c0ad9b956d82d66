"""
Fruit Entity Model

The single record type of the application. A fruit is a small,
fixed-shape value object: every attribute is required and the
instance cannot be changed once built.

Field Naming:
- Python attributes use snake_case (ready_to_eat)
- The camelCase key readyToEat is accepted when building from a mapping,
  so seed data written in either style loads the same way
"""

from pydantic import BaseModel, ConfigDict, Field


class Fruit(BaseModel):
    """
    One fruit in the stand.

    Construction fails with a pydantic ValidationError when any of the
    three attributes is missing, so a partially built record never
    reaches the store.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    name: str = Field(..., min_length=1, description="Display name, e.g. 'apple'")
    color: str = Field(..., min_length=1, description="Color word, e.g. 'red'")
    ready_to_eat: bool = Field(..., alias="readyToEat", description="Whether the fruit is ripe")
