class RelayException(Exception):
    status_code = 500
    error = "Proxy request failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.error)
        if message is not None:
            self.error = message

    def to_content(self) -> dict:
        return {"error": self.error}


class ConfigurationException(RelayException):
    pass


class ValidationException(RelayException):
    status_code = 400
    error = "targetUrl required"


class ForbiddenHostException(RelayException):
    status_code = 403
    error = "Target host not allowed"

    def __init__(self, hostname: str):
        super().__init__()
        self.hostname = hostname


class MethodNotAllowedException(RelayException):
    status_code = 405
    error = "Method not allowed"


class UpstreamTransportException(RelayException):
    status_code = 502
    error = "Proxy failed"

    def __init__(self, detail: str):
        super().__init__()
        self.detail = detail

    def to_content(self) -> dict:
        return {"error": self.error, "message": self.detail}
