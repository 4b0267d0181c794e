"""
WikiAPI - Wiki 相关接口

- GET/POST /api/v2/wikis
- GET /api/v2/wikis/count, GET /api/v2/wikis/tags
- GET/PATCH/DELETE /api/v2/wikis/:wikiId
"""

import logging
from typing import List, Optional, Union

from backlog.api.attachment import WikiAttachmentAPI
from backlog.api.options import (
    Option,
    WikiOptions,
    apply_options,
    id_option,
    id_or_key,
    text_option,
    validate_id,
)
from backlog.core.client import BacklogClient, get_backlog_client
from backlog.core.params import RequestParams
from backlog.schemas.models import Tag, TagList, Wiki, WikiList

logger = logging.getLogger(__name__)


class WikiAPI:
    """
    Backlog Wiki API 封装

    子服务:
    - attachment: Wiki 附件
    - option: Wiki 选项 (WikiOptions)
    """

    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()
        self.attachment = WikiAttachmentAPI(self.client)
        self.option = WikiOptions()

    async def all(self, project_id_or_key: Union[int, str], keyword: str = "") -> List[Wiki]:
        """
        获取项目的 Wiki 列表

        Args:
            project_id_or_key: 项目 ID 或 Key
            keyword: 搜索关键词，为空时不过滤
        """
        params = RequestParams()
        params.set("projectIdOrKey", id_or_key("projectIdOrKey", project_id_or_key))
        if keyword:
            params.set("keyword", keyword)

        resp = await self.client.get("wikis", params)
        wikis = WikiList.validate_python(resp.json())
        logger.info("Retrieved %d wikis", len(wikis))
        return wikis

    async def count(self, project_id_or_key: Union[int, str]) -> int:
        """获取项目的 Wiki 数量"""
        params = RequestParams()
        params.set("projectIdOrKey", id_or_key("projectIdOrKey", project_id_or_key))

        resp = await self.client.get("wikis/count", params)
        return int(resp.json()["count"])

    async def tags(self, project_id_or_key: Union[int, str]) -> List[Tag]:
        """获取项目的 Wiki 标签"""
        params = RequestParams()
        params.set("projectIdOrKey", id_or_key("projectIdOrKey", project_id_or_key))

        resp = await self.client.get("wikis/tags", params)
        return TagList.validate_python(resp.json())

    async def one(self, wiki_id: int) -> Wiki:
        """获取 Wiki"""
        validate_id("wikiId", wiki_id)

        resp = await self.client.get(f"wikis/{wiki_id}")
        return Wiki.model_validate(resp.json())

    async def create(
        self, project_id: int, name: str, content: str, *options: Option
    ) -> Wiki:
        """
        创建 Wiki

        Args:
            project_id: 项目 ID (数值)
            name: 页面名称
            content: 页面内容
            options: 仅 with_mail_notify 有意义
        """
        params = apply_options(
            RequestParams(),
            [
                id_option("projectId", project_id),
                text_option("name", name),
                text_option("content", content),
                *options,
            ],
        )
        logger.info("Creating wiki: project_id=%d, name=%s", project_id, name)

        resp = await self.client.post("wikis", params)
        return Wiki.model_validate(resp.json())

    async def update(self, wiki_id: int, *options: Option) -> Wiki:
        """更新 Wiki (名称、内容、邮件通知)"""
        validate_id("wikiId", wiki_id)
        params = apply_options(RequestParams(), options)
        logger.info("Updating wiki %d: fields=%s", wiki_id, list(params))

        resp = await self.client.patch(f"wikis/{wiki_id}", params)
        return Wiki.model_validate(resp.json())

    async def delete(self, wiki_id: int, *options: Option) -> Wiki:
        """删除 Wiki，返回被删除的 Wiki"""
        validate_id("wikiId", wiki_id)
        params = apply_options(RequestParams(), options)
        logger.info("Deleting wiki %d", wiki_id)

        resp = await self.client.delete(f"wikis/{wiki_id}", params)
        return Wiki.model_validate(resp.json())
