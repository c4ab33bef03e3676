"""Setting history schemas for API request/response."""

from pydantic import BaseModel, Field

from logstore.core.enums import Target


class SettingDTO(BaseModel):
    """Setting history entry response schema."""

    id: int
    entity_type: str
    entity_id: int
    target: int
    created_at: int

    model_config = {"from_attributes": True}


class CourseTargetDTO(BaseModel):
    """Effective course target response schema."""

    course_id: int
    target: int
    at: int | None = None
    is_default: bool = False


class CourseTargetUpdate(BaseModel):
    """Course target update schema."""

    target: Target = Field(..., description="0: no LRS, 1: main LRS, 2: secondary LRS")
