RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again in a moment."
CREDITS_EXHAUSTED_MESSAGE = "AI credits depleted. Please add credits to continue."
PAYMENT_REQUIRED_MESSAGE = "Payment required. Please add credits to your workspace."


class StudioError(Exception):
    """Base error for every tool. `status_code` is the HTTP status the API returns."""

    status_code = 500
    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ToolInputError(StudioError):
    status_code = 400
    default_message = "Invalid request"


class ServiceNotConfiguredError(StudioError):
    default_message = "AI service not configured"


class GatewayError(StudioError):
    default_message = "Failed to process request with AI"

    def __init__(self, message: str | None = None, *, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class RateLimitError(GatewayError):
    status_code = 429
    default_message = RATE_LIMIT_MESSAGE


class CreditsExhaustedError(GatewayError):
    status_code = 402
    default_message = CREDITS_EXHAUSTED_MESSAGE


class NoOutputError(StudioError):
    default_message = "No output was generated"


class UnchangedImageError(StudioError):
    status_code = 422
    default_message = "The model returned the reference image unchanged."


class ContentBlockedError(StudioError):
    status_code = 400
    default_message = "Content policy restriction: The generated image was blocked by safety filters."


def error_for_status(
    status: int,
    failure_message: str | None = None,
    *,
    rate_limit_message: str | None = None,
    credits_message: str | None = None,
) -> GatewayError:
    """
    Map an upstream HTTP status onto the three user-facing buckets.
    Tools may word the 429 and 402 messages themselves; None keeps the defaults.
    """
    if status == 429:
        return RateLimitError(rate_limit_message, upstream_status=status)
    if status == 402:
        return CreditsExhaustedError(credits_message, upstream_status=status)
    return GatewayError(failure_message, upstream_status=status)
