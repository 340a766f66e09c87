"""Service Container - Dependency injection container for core services"""

from dataclasses import dataclass
from services.preview_session_service import PreviewSessionService


@dataclass
class ServiceContainer:
    """
    Container for the services shared by the API and main loop.

    Usage:
        services = ServiceContainer(session_service=session)
        set_service_container(services)

        @router.get("/session")
        async def get_session(services: ServiceContainer = Depends(get_service_container)):
            return services.session_service.snapshot()
    """

    session_service: PreviewSessionService
