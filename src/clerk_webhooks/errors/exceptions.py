"""Exception classes for webhook verification and dispatch."""


class WebhookError(Exception):
    """Base exception for clerk-webhooks."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(WebhookError):
    """No usable signing secret. Raised at construction, never per request."""

    def __init__(self, message: str):
        super().__init__("CONFIGURATION_ERROR", message, status_code=500)


class MissingHeadersError(WebhookError):
    """One or more Svix signing headers absent from the request."""

    def __init__(self, missing: list[str]):
        super().__init__(
            "MISSING_HEADERS",
            "Error occurred -- no svix headers",
            details={"missing": missing},
            status_code=400,
        )


class VerificationFailedError(WebhookError):
    """Signature, timestamp or envelope rejected."""

    def __init__(self, reason: str, message_id: str | None = None):
        self.message_id = message_id
        super().__init__(
            "VERIFICATION_FAILED",
            "Error occurred",
            details={"reason": reason},
            status_code=400,
        )
