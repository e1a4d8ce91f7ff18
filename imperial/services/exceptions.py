from imperial.constants.service_errors import SERVICE_ERROR_MESSAGES, ServiceErrorCode
from imperial.core.exceptions import NotFoundException


class ServiceNotFoundError(NotFoundException):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            code=ServiceErrorCode.SERVICE_NOT_FOUND.value,
            message=SERVICE_ERROR_MESSAGES[ServiceErrorCode.SERVICE_NOT_FOUND].format(
                name=name
            ),
        )
