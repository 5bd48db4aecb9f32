class DomainException(Exception):
    pass


class LLMException(DomainException):
    def __init__(self, message: str) -> None:
        super().__init__(f"LLM error: {message}")


class RateLimitExhaustedError(LLMException):
    def __init__(self, attempts: int) -> None:
        super().__init__(
            f"Failed to detect KPIs after {attempts} attempts due to rate limiting"
        )
        self.attempts = attempts


class OutputMissingError(LLMException):
    def __init__(self, reason: str = "model returned no output") -> None:
        super().__init__(f"No usable KPI detection output: {reason}")
        self.reason = reason
