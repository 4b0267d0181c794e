import logging
from typing import Optional

from backlog.api.issue import IssueAPI, PullRequestAPI
from backlog.api.project import ProjectAPI
from backlog.api.space import SpaceAPI
from backlog.api.user import UserAPI
from backlog.api.wiki import WikiAPI
from backlog.core.client import BacklogClient, get_backlog_client

logger = logging.getLogger(__name__)


class BacklogAPI:
    """
    Backlog API 入口

    所有资源服务共享同一个传输层 client。未传入 client 时使用
    get_backlog_client() 返回的全局单例 (由 BACKLOG_* 环境变量配置)。

    使用示例:
        async with BacklogAPI(BacklogClient("https://example.backlog.com", api_key="...")) as backlog:
            me = await backlog.user.own()
            files = await backlog.wiki.attachment.list(1234)
    """

    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()
        self.user = UserAPI(self.client)
        self.project = ProjectAPI(self.client)
        self.space = SpaceAPI(self.client)
        self.wiki = WikiAPI(self.client)
        self.issue = IssueAPI(self.client)
        self.pull_request = PullRequestAPI(self.client)
        logger.debug("BacklogAPI initialized")

    async def close(self):
        await self.client.close()

    async def __aenter__(self) -> "BacklogAPI":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
