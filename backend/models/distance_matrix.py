from typing import List, Union, Any
from pydantic import BaseModel, field_validator


class DistanceQuery(BaseModel):
    # One origin (postcode or address) against one or many destinations
    origin: str
    destinations: List[str]

    @field_validator("destinations", mode="before")
    @classmethod
    def coerce_destinations(cls, v: Union[str, List[Any], None]) -> List[Any]:
        """A bare string means a single destination."""
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("origin")
    @classmethod
    def non_blank_origin(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("origin must be a non-empty string")
        return v

    @field_validator("destinations")
    @classmethod
    def non_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("must contain at least 1 destination")
        if any(not d.strip() for d in v):
            raise ValueError("destinations must be non-empty strings")
        return v
