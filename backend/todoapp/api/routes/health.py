from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter(tags=["health"])


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health")
async def health():
    return {"status": "OK", "timestamp": utc_timestamp()}
