from pydantic import BaseModel, ConfigDict, field_validator

class TicketNotification(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    category: str | None = None
    subject: str | None = None
    description: str | None = None
    company_name: str | None = None
    submitter_email: str | None = None
    ticket_id: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def falsy_scalars_as_absent(cls, value):
        # 0 and false count as missing, the same as an empty string
        if isinstance(value, (bool, int, float)) and not value:
            return None
        return value

    def is_complete(self) -> bool:
        return bool(self.category) and bool(self.subject)
