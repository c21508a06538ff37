from fastapi import APIRouter

from app.scoring import get_vocabulary

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {"status": "healthy", "vocabulary_size": len(get_vocabulary())}
