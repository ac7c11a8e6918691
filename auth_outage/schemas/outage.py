from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class OutageBase(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    starttime: int
    stoptime: int
    warntime: int | None = None
    title: str = Field(max_length=255)
    description: str | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value

    @model_validator(mode="after")
    def check_window(self):
        if self.stoptime <= self.starttime:
            raise ValueError("stoptime must be after starttime")
        if self.warntime is not None and self.warntime > self.starttime:
            raise ValueError("warntime must not be after starttime")
        return self


class OutageCreate(OutageBase):
    pass


class OutageUpdate(OutageBase):
    """Editable fields of an existing outage - audit fields are not accepted"""
    pass


class Outage(OutageBase):
    """An outage (maintenance window). id is None until the outage is saved."""
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    createdby: int | None = None
    modifiedby: int | None = None
    lastmodified: int | None = None


class OutageUpdateRecord(BaseModel):
    """Row written when updating an outage. Has no createdby so it can never be overwritten."""
    id: int
    starttime: int
    stoptime: int
    warntime: int | None = None
    title: str
    description: str | None = None
    modifiedby: int | None = None
    lastmodified: int | None = None
