from luxestay_control.clients.luxestay_sdk.errors import ApiError


class ErrorMapper:
    _KNOWN_CODES = {
        "NOT_FOUND": ("The requested record does not exist.", "Reload the listing and pick another record."),
        "INVALID_STATE": (
            "The booking cannot move to that status.",
            "Check the booking status before retrying.",
        ),
        "VALIDATION_ERROR": ("The request has invalid fields.", "Review the dates and required fields."),
        "INTERNAL_ERROR": ("Internal error in the service.", "Retry and share the trace_id if it persists."),
        "TIMEOUT_ERROR": ("The server took too long to respond.", "Retry the same operation."),
        "NETWORK_ERROR": ("The API is not reachable.", "Check LUXESTAY_BASE_URL and that the API is running."),
    }

    _STATUS_HINTS = {
        404: ("NOT_FOUND", "The requested record does not exist.", "Reload the listing and pick another record."),
        409: ("INVALID_STATE", "The booking cannot move to that status.", "Check the booking status before retrying."),
        422: ("VALIDATION_ERROR", "The request has invalid fields.", "Review the dates and required fields."),
        500: ("INTERNAL_ERROR", "Internal error in the service.", "Retry and share the trace_id if it persists."),
    }

    @classmethod
    def to_payload(cls, error: Exception) -> dict:
        if isinstance(error, ApiError):
            status_code = error.status_code or -1
            mapped = cls._STATUS_HINTS.get(status_code)
            if mapped is None and status_code >= 500:
                mapped = cls._STATUS_HINTS[500]
            if mapped is not None:
                code, message, suggestion = mapped
            else:
                message, suggestion = cls._KNOWN_CODES.get(
                    error.code,
                    (error.message, "Contact support with the trace_id."),
                )
                code = error.code
            return {
                "code": code,
                "message": message,
                "details": error.details,
                "trace_id": error.trace_id,
                "suggestion": suggestion,
            }
        return {
            "code": "INTERNAL_ERROR",
            "message": str(error),
            "details": None,
            "trace_id": None,
            "suggestion": "Retry and report the incident if it persists.",
        }

    @classmethod
    def to_display_message(cls, error: Exception) -> str:
        payload = cls.to_payload(error)
        return f"[{payload['code']}] {payload['message']} (trace_id={payload['trace_id']})"
