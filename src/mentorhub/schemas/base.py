"""Shared schema base.

Learn: The wire format is camelCase (menteeId, scheduledDate, createdAt)
while Python attributes stay snake_case. alias_generator handles the
mapping both ways. populate_by_name lets us build models from snake_case
dicts, and FastAPI serializes response models by alias.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class MessageResponse(BaseModel):
    message: str
