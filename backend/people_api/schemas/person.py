"""Person Schema — the record stored and served by the people resource.

Invariants:
    - firstName is the store key; it is optional, and numeric values are
      coerced to their string form (123 → "123") rather than rejected
    - Unknown fields (lastName, age, ...) are carried opaquely and echoed back
    - Serialization always uses the camelCase wire names

Design Decisions:
    - extra="allow" over a closed schema: the resource stores people by
      reference and never inspects fields other than the key
"""

from pydantic import BaseModel, ConfigDict, Field


class Person(BaseModel):
    """A person keyed by first name."""
    model_config = ConfigDict(
        extra="allow", populate_by_name=True, coerce_numbers_to_str=True,
    )

    first_name: str | None = Field(None, alias="firstName")

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
