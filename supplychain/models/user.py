from pydantic import Field

from .base import ApiModel

class User(ApiModel):
    id: int = Field(ge=1)
    username: str = Field(min_length=1)
    password_hash: str = Field(repr=False)
