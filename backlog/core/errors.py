"""
Backlog 客户端错误类型

- InvalidParameterError: 参数校验失败，在发起任何网络请求之前抛出
- APIResponseError: 服务端返回 4xx/5xx 时由传输层抛出

httpx 的网络错误以及 JSON / pydantic 解码错误不做包装，原样向上传递。
"""

from typing import Any, Dict, List, Optional


class BacklogError(Exception):
    """Backlog 客户端错误基类"""

    pass


class InvalidParameterError(BacklogError, ValueError):
    """参数校验失败"""

    def __init__(self, field: str, constraint: str):
        self.field = field
        self.constraint = constraint
        super().__init__(f"invalid {field}: {constraint}")


class APIResponseError(BacklogError):
    """
    Backlog API 错误响应

    Backlog 的错误响应体格式:
        {"errors": [{"message": "...", "code": 6, "moreInfo": ""}]}
    """

    def __init__(
        self,
        status_code: int,
        errors: Optional[List[Dict[str, Any]]] = None,
        text: str = "",
    ):
        self.status_code = status_code
        self.errors = errors or []
        self.text = text
        super().__init__(self._format_message())

    @property
    def messages(self) -> List[str]:
        return [str(e.get("message", "")) for e in self.errors]

    def _format_message(self) -> str:
        if self.errors:
            details = "; ".join(
                f"{e.get('message', '')} (code {e.get('code')})" for e in self.errors
            )
            return f"HTTP {self.status_code}: {details}"
        return f"HTTP {self.status_code}: {self.text[:200]}"
