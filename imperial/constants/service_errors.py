from enum import Enum


class ServiceErrorCode(str, Enum):
    SERVICE_NOT_FOUND = "SERVICE_NOT_FOUND"


SERVICE_ERROR_MESSAGES: dict[ServiceErrorCode, str] = {
    ServiceErrorCode.SERVICE_NOT_FOUND: "No service found with name '{name}'",
}
