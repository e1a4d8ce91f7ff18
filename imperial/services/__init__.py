from imperial.services.exceptions import ServiceNotFoundError
from imperial.services.registry import ServiceRegistry
from imperial.services.types import DEFAULT_TOKEN_PREFIX, ServiceConfig

__all__ = [
    "DEFAULT_TOKEN_PREFIX",
    "ServiceConfig",
    "ServiceNotFoundError",
    "ServiceRegistry",
]
