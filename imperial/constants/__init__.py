from imperial.constants.service_errors import SERVICE_ERROR_MESSAGES, ServiceErrorCode

__all__ = [
    "ServiceErrorCode",
    "SERVICE_ERROR_MESSAGES",
]
