"""
API 测试共享 Fixtures

提供 API 测试中通用的 Mock 传输层和 JSON 响应构造函数。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

TESTDATA_DIR = Path(__file__).resolve().parents[2] / "testdata" / "json"


def load_json_response(name: str, status_code: int = 200) -> httpx.Response:
    """
    用 testdata/json 下的文件内容构造 HTTP 响应。

    Args:
        name: 文件名，例如 "attachment_list.json"
        status_code: 状态码

    Returns:
        httpx.Response
    """
    return httpx.Response(status_code, content=(TESTDATA_DIR / name).read_bytes())


def create_json_response(data: Any, status_code: int = 200) -> httpx.Response:
    """用任意可序列化对象构造 HTTP 响应。"""
    return httpx.Response(status_code, json=data)


@pytest.fixture
def mock_client():
    """模拟 BacklogClient 传输层"""
    return AsyncMock()
