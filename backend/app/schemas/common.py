"""Shared Schema Pieces — camelCase wire format and free-form content parts.

Invariants:
    - Wire format is camelCase (alias_generator), Python side is snake_case
    - Both spellings accepted on input (populate_by_name)
    - ContentBlock keeps unknown fields verbatim (extra="allow")
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every request/response model exposed over HTTP."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ContentBlock(BaseModel):
    """One rendering unit of an article/event/interview body.

    Only `type` is checked; the front end owns the rest of the shape.
    """
    model_config = ConfigDict(extra="allow")

    type: str = Field(min_length=1)


class Slide(CamelModel):
    """Flipper carousel slide."""
    image_url: str = ""
    caption: str = ""
