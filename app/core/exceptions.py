"""
序号管理异常定义

服务层抛出这些异常，由 app.main 中注册的异常处理器统一转换为
``{"success": false, "message": ...}`` 响应。
"""

from fastapi import status


class SerialAdminError(Exception):
    """所有序号管理错误的基类"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(SerialAdminError):
    """输入格式不合法"""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(SerialAdminError):
    """操作的序号不存在"""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"找不到序号 '{code}'")


class ConflictError(SerialAdminError):
    """序号已存在"""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"序号 '{code}' 已存在")


class InternalError(SerialAdminError):
    """存储层意外错误，对外只返回通用信息"""

    def __init__(self, message: str = "服务器内部错误"):
        super().__init__(message)
