class SumoError(Exception):
    """Base exception for errors raised by sumo itself."""


class NotConfigured(SumoError):
    def __init__(self, path, reason: str = None):
        self.path = path
        message = f"Sumo is not configured, please fill in {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingParameter(SumoError):
    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(message)
