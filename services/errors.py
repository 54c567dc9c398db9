class ApiError(Exception):
    """Any failure talking to the backend: transport, HTTP status or bad JSON."""

    def __init__(self, message: str, *, status_code: int | None = None, url: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
