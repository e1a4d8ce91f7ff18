import logging
import threading

from imperial.services.exceptions import ServiceNotFoundError
from imperial.services.types import ServiceConfig

logger = logging.getLogger(__name__)


class ServiceRegistry:
    """Registry of OAuth service configs, keyed by service name.

    All access to the mapping goes through a single lock. Configs are copied
    on the way in and on the way out, so callers never share a mutable
    instance with the registry.
    """

    def __init__(self) -> None:
        self._services: dict[str, ServiceConfig] = {}
        self._lock = threading.Lock()

    def register(self, service: ServiceConfig) -> None:
        """Register a service, replacing any service with the same name."""
        stored = service.model_copy(deep=True)
        with self._lock:
            replaced = stored.name in self._services
            self._services[stored.name] = stored

        if replaced:
            logger.info(f"Replaced registered service: {stored.name}")
        else:
            logger.debug(f"Registered service: {stored.name}")

    def lookup(self, name: str) -> ServiceConfig:
        """Get a registered service by name.

        Raises:
            ServiceNotFoundError: if no service is registered under ``name``.
        """
        with self._lock:
            service = self._services.get(name)

        if service is None:
            logger.warning(f"Service not registered: {name}")
            raise ServiceNotFoundError(name)
        return service.model_copy(deep=True)

    register_service = register
    get_service = lookup

    def list_services(self) -> list[str]:
        """List all registered service names."""
        with self._lock:
            return sorted(self._services)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._services

    def __len__(self) -> int:
        with self._lock:
            return len(self._services)
