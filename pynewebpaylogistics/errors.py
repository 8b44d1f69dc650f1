class NewebPayError(Exception):
    """Base error for the NewebPay logistics SDK."""


class ValidationError(NewebPayError):
    """Bad input: key/IV length, missing business fields or configuration."""

    def __init__(self, message: str, violations: list[str] | None = None):
        super().__init__(message)
        self.violations = violations or []


class NetworkError(NewebPayError):
    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class ApiError(NewebPayError):
    def __init__(self, message: str, status: str, data=None):
        super().__init__(message)
        self.status = status
        self.data = data


class ParseError(ApiError):
    """响应体无法解析为 JSON（列印以外的请求类型）"""


class DecryptError(NewebPayError):
    pass
