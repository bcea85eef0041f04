"""Schema Bases: camelCase aliasing shared by every request and response model.

Invariants:
    - RequestModel is strict: "5" is not a number, "true" is not a bool
    - ResponseModel reads ORM objects (from_attributes) and is lax, because
      FastAPI re-validates the dumped JSON form of every response
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, strict=True,
    )


class ResponseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )
