"""Response Envelope: uniform {statusCode, message, data} success wrapper.

Invariants:
    - status_code is always 2xx and equals the HTTP status of the response
    - No pagination metadata, no links
"""

from typing import Generic, TypeVar

from catalog_api.schemas.base import ResponseModel

DataT = TypeVar("DataT")


class Envelope(ResponseModel, Generic[DataT]):
    status_code: int
    message: str
    data: DataT


def envelope(status_code: int, message: str, data) -> dict:
    """Build the envelope body; FastAPI validates it against response_model."""
    return {"statusCode": status_code, "message": message, "data": data}
