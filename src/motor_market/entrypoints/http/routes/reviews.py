from fastapi import APIRouter, Depends, status

from motor_market.entrypoints.http.dependencies import get_create_review_use_case
from motor_market.entrypoints.http.dtos.review import ReviewCreateDTO, ReviewResponseDTO
from motor_market.entrypoints.http.error_responses import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from motor_market.entrypoints.http.mappers.review_mapper import ReviewMapper
from motor_market.use_cases.create_review import CreateReview, CreateReviewRequest


router = APIRouter(tags=["Reviews"])


@router.post(
    "/reviews",
    response_model=ReviewResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Review a dealer or vehicle",
    description="""
    Post a 1-5 star review of a dealer, a vehicle, or both.

    Reviewing a dealer recomputes its `rating` (mean of all its reviews,
    two decimals) and `review_count`.
    """,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def create_review(
    payload: ReviewCreateDTO,
    use_case: CreateReview = Depends(get_create_review_use_case),
) -> ReviewResponseDTO:
    review = use_case.execute(CreateReviewRequest(review=ReviewMapper.to_new_review(payload)))
    return ReviewMapper.to_review_response(review)
