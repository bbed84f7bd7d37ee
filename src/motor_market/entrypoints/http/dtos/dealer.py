from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DealerCreateDTO(BaseModel):
    name: str = Field(min_length=1, max_length=100, examples=["Bay Motors"])
    location: str = Field(min_length=1, max_length=100, examples=["San Francisco, CA"])
    verified: bool = False
    description: str | None = None
    phone: str | None = Field(default=None, max_length=30)
    email: str | None = Field(default=None, max_length=255)
    address: str | None = Field(default=None, max_length=255)
    image_url: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Bay Motors",
                "location": "San Francisco, CA",
                "phone": "+1 415 555 0100",
            }
        }
    )


class DealerResponseDTO(BaseModel):
    id: str
    name: str
    location: str
    verified: bool
    rating: str = Field(description="Mean review rating as decimal string", examples=["4.33"])
    review_count: int
    description: str | None
    phone: str | None
    email: str | None
    address: str | None
    image_url: str | None
    created_at: datetime


class DealerListQueryDTO(BaseModel):
    location: str | None = Field(
        default=None,
        description="Filter by location (case-insensitive substring)",
        examples=["CA"],
    )


class DealerListResponseDTO(BaseModel):
    dealers: list[DealerResponseDTO]
