"""
Error types shared by the samples.

Two failure kinds come back from the Content API:
- TransportError: the API could not be reached or we could not authenticate
- ApiError: the request was well formed but rejected (status code + message)

Both are reported the same way: print and stop. Nothing here retries.
"""


class ContentApiError(Exception):
    """Base class for every failure talking to the Content API."""
    pass


class TransportError(ContentApiError):
    """Raised when the API (or the OAuth token endpoint) cannot be used."""
    pass


class ApiError(ContentApiError):
    """Raised when the API rejects a request."""

    def __init__(self, status_code: int, message: str, errors: list = None):
        super().__init__(f"API error {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.errors = errors or []

    @classmethod
    def from_response(cls, response) -> "ApiError":
        """Build from a requests.Response carrying a Google error payload."""
        try:
            payload = response.json().get("error", {})
        except ValueError:
            payload = {}

        if not isinstance(payload, dict):
            payload = {"message": str(payload)}

        message = payload.get("message") or response.text or response.reason or "Unknown error"
        return cls(response.status_code, message, payload.get("errors", []))


class ConfigError(Exception):
    """Raised when required configuration is missing."""
    pass


class WorkflowAborted(Exception):
    """Raised when a workflow step reports a non-success execution status."""
    pass


def print_api_error(err: Exception, indent: str = ""):
    """Print an API failure (and its sub-errors) to stdout."""
    if isinstance(err, ApiError):
        print(f"{indent}ERROR: [{err.status_code}] {err.message}")
        for sub in err.errors:
            print_error_entry(sub, indent + "  ")
    else:
        print(f"{indent}ERROR: {err}")


def print_error_entry(entry: dict, indent: str = "  "):
    """Print one {reason, message, domain} error entry, as found in batch responses."""
    reason = entry.get("reason", "unknown")
    message = entry.get("message", "")
    print(f"{indent}- {reason}: {message}")
