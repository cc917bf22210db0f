class ErrorBanner:
    @staticmethod
    def render(error_payload: dict | str) -> str:
        if isinstance(error_payload, str):
            return f"[ERROR] code=UI_VALIDATION message={error_payload} trace_id=n/a"
        trace_id = error_payload.get("trace_id") or "n/a"
        return (
            "[ERROR] "
            f"code={error_payload.get('code')} "
            f"message={error_payload.get('message')} "
            f"trace_id={trace_id} "
            f"suggestion={error_payload.get('suggestion')}"
        )

    @classmethod
    def show(cls, error_payload: dict | str) -> None:
        print(cls.render(error_payload))
