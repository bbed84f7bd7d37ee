from fastapi import APIRouter, Depends, Response, status

from motor_market.domain.favorite import NewFavorite
from motor_market.entrypoints.http.dependencies import (
    get_add_favorite_use_case,
    get_list_favorites_use_case,
    get_remove_favorite_use_case,
)
from motor_market.entrypoints.http.dtos.favorite import (
    FavoriteCreateDTO,
    FavoriteListResponseDTO,
    FavoriteResponseDTO,
)
from motor_market.entrypoints.http.error_responses import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from motor_market.entrypoints.http.mappers.favorite_mapper import FavoriteMapper
from motor_market.use_cases.add_favorite import AddFavorite, AddFavoriteRequest
from motor_market.use_cases.list_favorites import ListFavorites, ListFavoritesRequest
from motor_market.use_cases.remove_favorite import RemoveFavorite, RemoveFavoriteRequest


router = APIRouter(tags=["Favorites"])


@router.get(
    "/users/{user_id}/favorites",
    response_model=FavoriteListResponseDTO,
    summary="Saved vehicles of a shopper",
)
def list_favorites(
    user_id: str,
    use_case: ListFavorites = Depends(get_list_favorites_use_case),
) -> FavoriteListResponseDTO:
    favorites = use_case.execute(ListFavoritesRequest(user_id=user_id))
    return FavoriteMapper.to_list_response(favorites)


@router.post(
    "/users/{user_id}/favorites",
    response_model=FavoriteResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Save a vehicle",
    description="""
    Idempotent: saving a vehicle that is already saved answers 200 with the
    existing favorite instead of 201.
    """,
    responses={
        status.HTTP_200_OK: {"description": "Vehicle was already saved"},
        **NOT_FOUND_RESPONSE,
        **VALIDATION_RESPONSE,
    },
)
def add_favorite(
    user_id: str,
    payload: FavoriteCreateDTO,
    response: Response,
    use_case: AddFavorite = Depends(get_add_favorite_use_case),
) -> FavoriteResponseDTO:
    result = use_case.execute(
        AddFavoriteRequest(favorite=NewFavorite(user_id=user_id, vehicle_id=payload.vehicle_id))
    )
    if not result.created:
        response.status_code = status.HTTP_200_OK
    return FavoriteMapper.to_favorite_response(result.favorite)


@router.delete(
    "/users/{user_id}/favorites/{vehicle_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Unsave a vehicle",
    description="Answers 204 whether or not the vehicle was saved.",
)
def remove_favorite(
    user_id: str,
    vehicle_id: str,
    use_case: RemoveFavorite = Depends(get_remove_favorite_use_case),
) -> Response:
    use_case.execute(RemoveFavoriteRequest(user_id=user_id, vehicle_id=vehicle_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
