from datetime import datetime

from pydantic import BaseModel, ConfigDict


class FavoriteCreateDTO(BaseModel):
    vehicle_id: str

    model_config = ConfigDict(
        json_schema_extra={"example": {"vehicle_id": "550e8400-e29b-41d4-a716-446655440000"}}
    )


class FavoriteResponseDTO(BaseModel):
    id: str
    user_id: str
    vehicle_id: str
    created_at: datetime


class FavoriteListResponseDTO(BaseModel):
    favorites: list[FavoriteResponseDTO]
