from pydantic import BaseModel, ConfigDict, Field


class Hunk(BaseModel):
    model_config = ConfigDict(frozen=True)

    new_start: int = Field(ge=1)
    new_lines: int = Field(ge=0)
    content: str = ""

    @property
    def new_end(self) -> int:
        # Inclusive upper bound, one past the last line of the hunk
        return self.new_start + self.new_lines

    def contains(self, line: int) -> bool:
        return self.new_start <= line <= self.new_end


class FileChange(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    hunks: tuple[Hunk, ...] = ()
