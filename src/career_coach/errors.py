"""Exception hierarchy shared by services, repositories and handlers."""


class CareerCoachError(Exception):
    def __init__(self, detail: str, status_code: int = 500) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class GenerationError(CareerCoachError):
    """The external text-generation call failed (transport, HTTP or empty output)."""

    def __init__(self, detail: str, status_code: int = 502) -> None:
        super().__init__(detail, status_code)


class QuotaExceededError(GenerationError):
    """The text-generation service refused the call because of quota or rate limits."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail, status_code=429)


class PayloadParseError(CareerCoachError):
    """Generated text did not match the expected payload shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail, status_code=502)


class MissingInsightsError(CareerCoachError):
    """A roadmap was requested without any target skills to learn."""

    def __init__(self, detail: str = "Industry insights not found. Please set your industry first.") -> None:
        super().__init__(detail, status_code=400)
