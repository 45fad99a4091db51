from pydantic import BaseModel, ConfigDict, Field


class CustomerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    # Column widths only; email and phone formats are not checked
    email: str = Field(..., min_length=1, max_length=100)
    phone: str | None = Field(default=None, max_length=15)


class CustomerRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    customer_id: int
    name: str
    email: str
    phone: str | None
