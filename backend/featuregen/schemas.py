from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional


# ---- Core Concepts ----

class FeatureDescriptor(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    user_stories: List[str] = Field(default_factory=list, alias="userStories")
    technical_details: List[str] = Field(default_factory=list, alias="technicalDetails")
    priority: Optional[Literal["high", "medium", "low"]] = None

    @field_validator("user_stories", "technical_details", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        # Models sometimes emit null instead of []
        return [] if value is None else value

    @field_validator("priority", mode="before")
    @classmethod
    def _normalize_priority(cls, value):
        if isinstance(value, str):
            return value.strip().lower() or None
        return value


# ---- HTTP payloads ----

class GenerateRequest(BaseModel):
    requirements: Optional[str] = ""


class GenerateResponse(BaseModel):
    status: Literal["success", "error"]
    sequence: int
    features: List[FeatureDescriptor] = []


class BoardResponse(BaseModel):
    state: Literal["idle", "loading", "done"]
    sequence: int
    submit_enabled: bool
    requirements: str = ""
    features: List[FeatureDescriptor] = []
