from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReviewCreateDTO(BaseModel):
    """
    Request payload for reviewing a dealer and/or a vehicle.

    Range and target checks are domain rules, reported with their own codes.
    """

    rating: int = Field(description="1 to 5", examples=[5])
    dealer_id: str | None = None
    vehicle_id: str | None = None
    user_id: str | None = Field(default=None, max_length=100)
    comment: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "rating": 5,
                "dealer_id": "550e8400-e29b-41d4-a716-446655440000",
                "comment": "Smooth purchase",
            }
        }
    )


class ReviewResponseDTO(BaseModel):
    id: str
    rating: int
    dealer_id: str | None
    vehicle_id: str | None
    user_id: str | None
    comment: str | None
    created_at: datetime


class ReviewListResponseDTO(BaseModel):
    reviews: list[ReviewResponseDTO]
