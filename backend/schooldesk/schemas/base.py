"""
Base pydantic model for the API.

Fields are declared in snake_case and exposed as camelCase on the wire
(firstName, gradeLevel, ...). Input accepts both spellings.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class MessageResponse(BaseModel):
    message: str
