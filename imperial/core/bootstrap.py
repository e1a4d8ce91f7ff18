import logging

from imperial.core.logging import setup_logging
from imperial.core.settings import Settings
from imperial.core.settings import settings as default_settings
from imperial.services.providers import register_builtin_services
from imperial.services.registry import ServiceRegistry

logger = logging.getLogger(__name__)


def create_service_registry(settings: Settings | None = None) -> ServiceRegistry:
    """Build the registry the authentication subsystem holds for the app's lifetime."""
    settings = settings or default_settings
    setup_logging(settings.log_level)
    logger.info("Initialising service registry for %s", settings.app_name)

    registry = ServiceRegistry()
    register_builtin_services(registry, settings.builtin_service_list)
    logger.info("Service registry ready with: %s", ", ".join(registry.list_services()))
    return registry
