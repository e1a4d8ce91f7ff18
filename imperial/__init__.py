from imperial.services import (
    DEFAULT_TOKEN_PREFIX,
    ServiceConfig,
    ServiceNotFoundError,
    ServiceRegistry,
)

__all__ = [
    "DEFAULT_TOKEN_PREFIX",
    "ServiceConfig",
    "ServiceNotFoundError",
    "ServiceRegistry",
]
