import logging
from collections.abc import Callable, Iterable

from imperial.services.exceptions import ServiceNotFoundError
from imperial.services.providers.github import github_service
from imperial.services.providers.google import google_service
from imperial.services.registry import ServiceRegistry
from imperial.services.types import ServiceConfig

logger = logging.getLogger(__name__)

BUILTIN_SERVICES: dict[str, Callable[[], ServiceConfig]] = {
    "github": github_service,
    "google": google_service,
}


def register_builtin_services(
    registry: ServiceRegistry, names: Iterable[str] | None = None
) -> None:
    """Register the stock providers, or only those listed in ``names``."""
    selected = list(BUILTIN_SERVICES) if names is None else list(names)
    for name in selected:
        if name not in BUILTIN_SERVICES:
            logger.error(f"Unknown built-in service: {name}")
            raise ServiceNotFoundError(name)

    for name in selected:
        registry.register(BUILTIN_SERVICES[name]())


__all__ = [
    "BUILTIN_SERVICES",
    "github_service",
    "google_service",
    "register_builtin_services",
]
