class ServerError(Exception):
    """Base class for server-related errors"""

    def __init__(self, msg="Server error occurred", status_code=500):
        self.msg = msg
        self.status_code = status_code
        super().__init__(self.msg)


class ResourceNotFoundError(ServerError):
    """Raised when requested resource is not found"""

    def __init__(self, msg="Resource not found", status_code=404):
        super().__init__(msg=msg, status_code=status_code)
