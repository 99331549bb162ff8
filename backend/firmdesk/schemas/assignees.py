from pydantic import BaseModel, Field, field_validator

class AssigneeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=256)
    captain: str | None = Field(default=None, max_length=256)


class AssigneeFormIn(BaseModel):
    """Manual entry form: unlike the CSV upload, a captain must be given."""

    name: str
    captain: str

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Team Name is required")
        return v

    @field_validator("captain")
    @classmethod
    def captain_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Captain is required")
        return v

    def to_create(self) -> AssigneeCreate:
        return AssigneeCreate(name=self.name, captain=self.captain)

class AssigneeOut(BaseModel):
    id: int
    name: str
    captain: str | None = None
