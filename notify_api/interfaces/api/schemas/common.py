"""Field types shared by several request payloads."""

from typing import Annotated

from pydantic import Field

# Largest value a signed 64-bit INTEGER column can hold.
MAX_ENTITY_ID = 2**63 - 1

EntityId = Annotated[int, Field(gt=0, le=MAX_ENTITY_ID)]

__all__ = ["MAX_ENTITY_ID", "EntityId"]
