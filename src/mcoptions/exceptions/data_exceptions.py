class DataError(Exception):
    """Base class for data-related errors."""

    pass


class MissingDataError(DataError):
    """Raised when a quotes file cannot be found or read."""

    def __init__(self, source: str, details: str = ""):
        msg = f"Cannot open quotes source: {source}"
        if details:
            msg += f" | Details: {details}"
        super().__init__(msg)


class InvalidDataFormatError(DataError):
    """Raised when a quote record cannot be parsed."""

    def __init__(self, message: str):
        super().__init__(f"Invalid data format: {message}")
