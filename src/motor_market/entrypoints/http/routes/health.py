from fastapi import APIRouter


router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness check")
def health() -> dict[str, str]:
    """Answers without touching the database."""
    return {"status": "ok"}
