from enum import Enum


class ForwardOutcome(str, Enum):
    """Terminal states of a single relay request."""

    SUCCESS = "success"
    PASSTHROUGH_ERROR = "passthrough_error"
    INTERNAL_ERROR = "internal_error"
    CONFIGURATION_MISSING = "configuration_missing"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    MALFORMED_REQUEST = "malformed_request"

    @property
    def is_failure(self) -> bool:
        return self is not ForwardOutcome.SUCCESS
