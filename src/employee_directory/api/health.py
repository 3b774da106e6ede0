from fastapi import APIRouter

from employee_directory.utils.logging import get_project_version

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": get_project_version()}
