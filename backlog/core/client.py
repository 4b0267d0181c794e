import logging
import threading
from typing import Optional

import aiofiles
import httpx

from backlog.core.config import settings
from backlog.core.errors import APIResponseError
from backlog.core.params import RequestParams

logger = logging.getLogger(__name__)

API_PATH = "/api/v2/"

_backlog_client = None
_backlog_client_lock = threading.Lock()  # 线程安全锁


def _mask_token(token: str, visible_chars: int = 4) -> str:
    """对 token 进行脱敏处理，仅显示前几个字符"""
    if not token or len(token) <= visible_chars:
        return "***"
    return f"{token[:visible_chars]}***"


class BacklogAuth(httpx.Auth):
    """
    Backlog API 认证

    - OAuth 2.0 access token: Authorization: Bearer <token>
    - API Key: 追加 apiKey 查询参数

    两者都配置时优先使用 access token。
    """

    def __init__(
        self, api_key: Optional[str] = None, access_token: Optional[str] = None
    ):
        self.api_key = api_key
        self.access_token = access_token

    def auth_flow(self, request: httpx.Request):
        if self.access_token:
            request.headers["Authorization"] = f"Bearer {self.access_token}"
        elif self.api_key:
            request.url = request.url.copy_merge_params({"apiKey": self.api_key})
        yield request


class BacklogClient:
    """
    Backlog REST API 异步传输层

    每个方法只发起一次 HTTP 请求并返回 httpx.Response，不做重试。
    状态码 >= 400 时抛出 APIResponseError；网络错误原样抛出。
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        access_token: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        base_url = base_url or settings.BACKLOG_BASE_URL
        if not base_url:
            raise ValueError(
                "BACKLOG_BASE_URL 环境变量未配置，"
                "请设置为空间地址，例如 https://example.backlog.com"
            )
        api_key = api_key or settings.BACKLOG_API_KEY
        access_token = access_token or settings.BACKLOG_ACCESS_TOKEN
        if not api_key and not access_token:
            logger.warning(
                "No Backlog credentials configured (BACKLOG_API_KEY / BACKLOG_ACCESS_TOKEN)"
            )

        self.base_url = base_url.rstrip("/") + API_PATH
        self.timeout = timeout if timeout is not None else settings.BACKLOG_TIMEOUT
        logger.info(
            "Initializing BacklogClient with base_url=%s, credential=%s",
            self.base_url,
            _mask_token(access_token or api_key or ""),
        )
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            auth=BacklogAuth(api_key=api_key, access_token=access_token),
            timeout=httpx.Timeout(self.timeout),
        )
        logger.debug("BacklogClient initialized successfully")

    async def _request(
        self,
        method: str,
        spath: str,
        params: Optional[RequestParams] = None,
        files: Optional[dict] = None,
    ) -> httpx.Response:
        """
        发送请求

        Args:
            method: HTTP 方法 (GET, POST, PATCH, DELETE)
            spath: 相对于 /api/v2/ 的资源路径，例如 "users/myself"
            params: 请求参数；GET 时作为 query string，其它方法作为表单请求体
            files: multipart 文件 (仅上传时使用)

        Returns:
            httpx.Response

        Raises:
            APIResponseError: 状态码 >= 400
            httpx.HTTPError: 网络错误、超时等
        """
        values = params.to_dict() if params else None
        logger.debug(
            "Making %s request to %s (params=%s)",
            method,
            spath,
            list(values) if values else [],
        )

        if method == "GET":
            response = await self.client.get(spath, params=values)
        elif method in ("POST", "PATCH", "DELETE"):
            response = await self.client.request(
                method, spath, data=values, files=files
            )
        else:
            logger.error("Unsupported HTTP method: %s", method)
            raise ValueError(f"Unsupported HTTP method: {method}")

        logger.debug("Response status: %d from %s", response.status_code, spath)

        if response.status_code >= 400:
            logger.error(
                "HTTP error %d from %s: %s",
                response.status_code,
                spath,
                response.text[:200],
            )
            raise _api_response_error(response)

        logger.info(
            "Request successful: %s %s -> %d", method, spath, response.status_code
        )
        return response

    async def get(
        self, spath: str, params: Optional[RequestParams] = None
    ) -> httpx.Response:
        """GET 请求"""
        return await self._request("GET", spath, params)

    async def post(
        self, spath: str, params: Optional[RequestParams] = None
    ) -> httpx.Response:
        """POST 请求"""
        return await self._request("POST", spath, params)

    async def patch(
        self, spath: str, params: Optional[RequestParams] = None
    ) -> httpx.Response:
        """PATCH 请求"""
        return await self._request("PATCH", spath, params)

    async def delete(
        self, spath: str, params: Optional[RequestParams] = None
    ) -> httpx.Response:
        """DELETE 请求"""
        return await self._request("DELETE", spath, params)

    async def upload(self, spath: str, fpath: str, fname: str) -> httpx.Response:
        """
        以 multipart/form-data 上传本地文件

        Args:
            spath: 资源路径
            fpath: 本地文件路径
            fname: 上传后的文件名
        """
        # 在线程池中读取，避免阻塞事件循环
        async with aiofiles.open(fpath, "rb") as f:
            content = await f.read()
        logger.debug("Uploading %s (%d bytes) as %s", fpath, len(content), fname)
        return await self._request("POST", spath, files={"file": (fname, content)})

    async def close(self):
        """关闭客户端连接"""
        logger.info("Closing BacklogClient connection")
        await self.client.aclose()
        logger.debug("BacklogClient connection closed")

    async def __aenter__(self) -> "BacklogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


def _api_response_error(response: httpx.Response) -> APIResponseError:
    """从错误响应体中提取 Backlog 的 errors 列表"""
    errors = []
    try:
        data = response.json()
    except ValueError:
        logger.debug("Error response from %s is not JSON", response.url)
    else:
        if isinstance(data, dict) and isinstance(data.get("errors"), list):
            errors = data["errors"]
    return APIResponseError(response.status_code, errors, response.text)


def get_backlog_client() -> BacklogClient:
    """
    获取全局单例客户端（线程安全）

    使用双重检查锁定模式，防止多线程/多协程并发时重复实例化。
    连接参数来自 settings (BACKLOG_BASE_URL 等环境变量)。

    Returns:
        BacklogClient: Backlog API 客户端实例

    Raises:
        ValueError: 未配置 BACKLOG_BASE_URL
    """
    global _backlog_client

    # 快速路径：已初始化则直接返回
    if _backlog_client is not None:
        logger.debug("Reusing existing BacklogClient singleton instance")
        return _backlog_client

    # 慢路径：使用锁保护初始化
    with _backlog_client_lock:
        # 双重检查：防止等待锁期间其他线程已完成初始化
        if _backlog_client is not None:
            logger.debug(
                "Reusing existing BacklogClient singleton instance (after lock)"
            )
            return _backlog_client

        logger.debug("Creating new BacklogClient singleton instance")
        _backlog_client = BacklogClient()

    return _backlog_client
