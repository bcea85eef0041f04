"""Domain Types: identity types, the onModel discriminator and item references.

Invariants:
    - EntityId wraps UUID; store identifiers are never bare strings in domain logic
    - OnModel has exactly two members, matching the collections an item can point into
    - ModelRef always carries its tag; consumers dispatch on the tag, never on the type

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost
    - str Enum for OnModel: serializes to JSON as "Category"/"Subcategory" as-is
    - ModelRef as a frozen dataclass (tag + target id) over a class per variant:
      the resolver maps tag -> repository with a plain dict
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class OnModel(str, Enum):
    """Collections an item may belong to."""
    CATEGORY = "Category"
    SUBCATEGORY = "Subcategory"


# ─── References ──────────────────────────────────────────────────

@dataclass(frozen=True)
class ModelRef:
    """Tagged reference from an item to its owning Category or Subcategory."""
    on_model: OnModel
    model_id: str

    @classmethod
    def category(cls, model_id: str) -> "ModelRef":
        return cls(OnModel.CATEGORY, model_id)

    @classmethod
    def subcategory(cls, model_id: str) -> "ModelRef":
        return cls(OnModel.SUBCATEGORY, model_id)
