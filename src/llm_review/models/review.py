from pydantic import BaseModel, ConfigDict, Field


class ReviewComment(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int
    comment: str = Field(min_length=1)
