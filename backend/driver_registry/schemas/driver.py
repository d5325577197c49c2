from pydantic import BaseModel, ConfigDict, Field

class DriverOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    driver_number: int = Field(..., description="Car number, primary key")
    full_name: str
    team: str | None = None
