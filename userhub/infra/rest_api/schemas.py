from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Annotated


class UserRegisterRequest(BaseModel):
    uuid: Optional[Annotated[str, Field(min_length=1, max_length=255)]] = None
    name: Annotated[str, Field(min_length=1, max_length=100)]
    email: Annotated[str, Field(min_length=3, max_length=255)]
    password: Annotated[str, Field(min_length=8, max_length=128)]
    tag_name: Annotated[str, Field(min_length=1, max_length=30)]
    bio: Optional[Annotated[str, Field(max_length=500)]] = None
    profile_image: Optional[Annotated[str, Field(max_length=2048)]] = None
    number_of_publications: Annotated[int, Field(ge=0)] = 0
    publications: List[str] = Field(default_factory=list)

    @field_validator('uuid')
    @classmethod
    def validate_uuid(cls, v):
        if v is not None and not v.strip():
            return None
        return v


class UserRegisterResponse(BaseModel):
    uuid: str
    name: str
    email: str
    tag_name: str
    bio: str
    profile_image: str
    number_of_publications: int
    publications: List[str]
