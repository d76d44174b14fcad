from fastapi import APIRouter

from judgefinder.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Report that the service is up.

    Public endpoint with no dependencies, used by load balancers.
    """
    return {"status": "healthy", "version": get_settings().VERSION}
