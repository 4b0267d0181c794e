"""
ActivityAPI - 最近活动

- 空间: GET /api/v2/space/activities
- 项目: GET /api/v2/projects/:projectIdOrKey/activities
- 用户: GET /api/v2/users/:userId/activities
"""

import logging
from typing import List, Optional, Union

from backlog.api.options import ActivityOptions, Option, apply_options, id_or_key, validate_id
from backlog.core.client import BacklogClient, get_backlog_client
from backlog.core.params import RequestParams
from backlog.schemas.models import Activity, ActivityList

logger = logging.getLogger(__name__)


async def list_activities(client, spath: str, options) -> List[Activity]:
    params = apply_options(RequestParams(), options)
    logger.debug("Listing activities: spath=%s, params=%s", spath, params)

    resp = await client.get(spath, params)
    activities = ActivityList.validate_python(resp.json())
    logger.info("Retrieved %d activities from %s", len(activities), spath)
    return activities


class SpaceActivityAPI:
    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()
        self.option = ActivityOptions()

    async def list(self, *options: Option) -> List[Activity]:
        """
        获取空间的最近活动

        Args:
            options: ActivityOptions 生成的选项 (类型、minId、maxId、count、order)

        Raises:
            InvalidParameterError: 选项校验失败（不会发起请求）
        """
        return await list_activities(self.client, "space/activities", options)


class ProjectActivityAPI:
    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()
        self.option = ActivityOptions()

    async def list(
        self, project_id_or_key: Union[int, str], *options: Option
    ) -> List[Activity]:
        """获取项目的最近活动"""
        project = id_or_key("projectIdOrKey", project_id_or_key)
        return await list_activities(
            self.client, f"projects/{project}/activities", options
        )


class UserActivityAPI:
    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()
        self.option = ActivityOptions()

    async def list(self, user_id: int, *options: Option) -> List[Activity]:
        """获取用户的最近活动"""
        validate_id("userId", user_id)
        return await list_activities(self.client, f"users/{user_id}/activities", options)
