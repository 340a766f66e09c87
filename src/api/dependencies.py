"""
API dependencies

main_asyncio.py builds the ServiceContainer and hands it over with
set_service_container(); endpoints receive it through
Depends(get_service_container). Until then every endpoint answers 503.
"""

from typing import Optional

from fastapi import HTTPException, status

from services.service_container import ServiceContainer

_services: Optional[ServiceContainer] = None


def set_service_container(services: Optional[ServiceContainer]) -> None:
    """Install (or clear, with None) the container used by all endpoints"""
    global _services
    _services = services


async def get_service_container() -> ServiceContainer:
    if _services is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Preview session not initialized yet",
        )
    return _services
