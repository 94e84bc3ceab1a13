"""Rejections raised by the placeholder pipeline.

Each carries the HTTP status and the fixed plain-text body it maps to.
"""


class PlaceholderError(Exception):
    status_code = 400
    message = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MethodNotAllowed(PlaceholderError):
    status_code = 405
    message = "Method not allowed"

    def __init__(self, method: str = "") -> None:
        self.method = method
        super().__init__()


class RequestTooLarge(PlaceholderError):
    message = "Too big of an image!"

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__()


class RequestTooSmall(PlaceholderError):
    message = "Too small of an image!"

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__()
