from typing import Dict, Iterator, List, Optional


class RequestParams:
    """
    请求参数容器

    key -> 有序的字符串值列表，保留插入顺序以保证编码结果稳定。
    GET 请求时编码为 query string，其它请求编码为表单请求体。
    """

    def __init__(self):
        self._values: Dict[str, List[str]] = {}

    def add(self, key: str, value: str) -> None:
        """追加一个值（同一 key 可对应多个值，例如 attachmentId[]）"""
        self._values.setdefault(key, []).append(value)

    def set(self, key: str, value: str) -> None:
        """设置 key 的唯一值，覆盖已有值"""
        self._values[key] = [value]

    def setlist(self, key: str, values: List[str]) -> None:
        self._values[key] = list(values)

    def get(self, key: str) -> str:
        """返回 key 的第一个值，不存在时返回空字符串"""
        values = self._values.get(key)
        if not values:
            return ""
        return values[0]

    def getlist(self, key: str) -> Optional[List[str]]:
        values = self._values.get(key)
        if values is None:
            return None
        return list(values)

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def to_dict(self) -> Dict[str, List[str]]:
        """转换为 httpx 可接受的 params / data 格式"""
        return {key: list(values) for key, values in self._values.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        # 不输出值，避免 password 等敏感参数进入日志
        return f"RequestParams(keys={list(self._values)})"
