"""
IssueAPI / PullRequestAPI - 课题与 Pull Request 接口

- GET /api/v2/issues/:issueIdOrKey
- 附件子服务见 attachment.py
"""

import logging
from typing import Optional, Union

from backlog.api.attachment import IssueAttachmentAPI, PullRequestAttachmentAPI
from backlog.api.options import id_or_key
from backlog.core.client import BacklogClient, get_backlog_client
from backlog.schemas.models import Issue

logger = logging.getLogger(__name__)


class IssueAPI:
    """课题 (Issue) API，子服务 attachment 管理课题附件"""

    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()
        self.attachment = IssueAttachmentAPI(self.client)

    async def one(self, issue_id_or_key: Union[int, str]) -> Issue:
        """
        获取课题

        API: GET /api/v2/issues/:issueIdOrKey
        """
        issue = id_or_key("issueIdOrKey", issue_id_or_key)
        logger.debug("Getting issue: %s", issue)

        resp = await self.client.get(f"issues/{issue}")
        return Issue.model_validate(resp.json())


class PullRequestAPI:
    """Pull Request API，目前只提供附件管理"""

    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()
        self.attachment = PullRequestAttachmentAPI(self.client)
