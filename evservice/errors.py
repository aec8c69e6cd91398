"""
Error types and Vietnamese user-facing messages.
"""
from typing import Any, Optional

GENERIC_SERVER_ERROR = "Có lỗi máy chủ. Vui lòng thử lại."

STATUS_MESSAGES = {
    400: "Tham số không hợp lệ. Vui lòng kiểm tra ngày/giờ/dịch vụ.",
    401: "Vui lòng đăng nhập để tiếp tục.",
    403: "Bạn không có quyền thực hiện thao tác này.",
    404: "Không tìm thấy dữ liệu.",
    409: "Khung giờ đã có lịch. Vui lòng chọn khung khác.",
    500: "Có lỗi xảy ra. Vui lòng thử lại.",
}

SESSION_EXPIRED = "Phiên đăng nhập đã hết hạn. Vui lòng đăng nhập lại."

AUTH_ERROR_MESSAGES = {
    "TOKEN_EXPIRED": SESSION_EXPIRED,
    "TOKEN_INVALID": "Mã xác thực không hợp lệ. Vui lòng đăng nhập lại.",
    "AUTH_REQUIRED": "Vui lòng đăng nhập để tiếp tục.",
    "USER_NOT_FOUND": "Tài khoản không tồn tại. Vui lòng đăng nhập lại.",
    "ACCOUNT_DISABLED": "Tài khoản đã bị vô hiệu hóa. Vui lòng liên hệ hỗ trợ.",
}


class EVServiceError(Exception):
    """Base class for all client errors."""
    pass


class AuthError(EVServiceError):
    """Raised when a session operation (login, register, profile) fails."""
    pass


class ApiError(EVServiceError):
    """
    A failed API call.

    `message` is already translated for display; the raw response is kept
    so call sites can inspect the body (conflicts, reason codes).
    """

    def __init__(
        self,
        message: str,
        status: int = 500,
        error_code: Optional[str] = None,
        reason_code: Optional[str] = None,
        conflicts: Any = None,
        server_message: Optional[str] = None,
        response: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.error_code = error_code
        self.reason_code = reason_code
        self.conflicts = conflicts
        self.server_message = server_message
        self.response = response

    @property
    def is_conflict(self) -> bool:
        return self.status == 409

    def __repr__(self) -> str:
        return f"ApiError(status={self.status}, message={self.message!r})"


def auth_error_message(error_code: Optional[str]) -> str:
    """Message shown when the server rejects the session."""
    return AUTH_ERROR_MESSAGES.get(error_code or "", SESSION_EXPIRED)


def translate_error(status: Optional[int], server_message: Optional[str] = None) -> str:
    """
    Pick the message to show for a failed call.

    Server messages that are already Vietnamese are passed through, anything
    else falls back to the static status mapping.
    """
    status = status or 500
    if server_message and "không" in server_message:
        return server_message
    return STATUS_MESSAGES.get(status, STATUS_MESSAGES[500])
