"""
SpaceAPI - 空间相关接口

- GET /api/v2/space
- GET /api/v2/space/diskUsage
- GET /api/v2/space/notification
"""

import logging
from typing import Optional

from backlog.api.activity import SpaceActivityAPI
from backlog.api.attachment import SpaceAttachmentAPI
from backlog.core.client import BacklogClient, get_backlog_client
from backlog.schemas.models import DiskUsage, Space, SpaceNotification

logger = logging.getLogger(__name__)


class SpaceAPI:
    """
    Backlog 空间 API 封装

    子服务:
    - activity: 空间的最近活动
    - attachment: 文件上传
    """

    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()
        self.activity = SpaceActivityAPI(self.client)
        self.attachment = SpaceAttachmentAPI(self.client)

    async def one(self) -> Space:
        """获取空间信息"""
        resp = await self.client.get("space")
        return Space.model_validate(resp.json())

    async def disk_usage(self) -> DiskUsage:
        """获取空间容量使用情况 (字节)"""
        resp = await self.client.get("space/diskUsage")
        usage = DiskUsage.model_validate(resp.json())
        logger.debug("Disk usage: capacity=%d", usage.capacity)
        return usage

    async def notification(self) -> SpaceNotification:
        """获取空间公告"""
        resp = await self.client.get("space/notification")
        return SpaceNotification.model_validate(resp.json())
