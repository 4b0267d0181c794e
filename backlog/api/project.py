"""
ProjectAPI - 项目相关接口

- GET/POST /api/v2/projects
- GET/PATCH/DELETE /api/v2/projects/:projectIdOrKey
"""

import logging
from typing import List, Optional, Union

from backlog.api.activity import ProjectActivityAPI
from backlog.api.options import (
    Option,
    ProjectOptions,
    apply_options,
    bool_option,
    id_or_key,
    text_option,
)
from backlog.api.user import ProjectUserAPI
from backlog.core.client import BacklogClient, get_backlog_client
from backlog.core.params import RequestParams
from backlog.schemas.models import Project, ProjectList

logger = logging.getLogger(__name__)


class ProjectAPI:
    """
    Backlog 项目 API 封装

    子服务:
    - activity: 项目的最近活动
    - user: 项目成员 / 管理员
    - option: 项目选项 (ProjectOptions)
    """

    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()
        self.activity = ProjectActivityAPI(self.client)
        self.user = ProjectUserAPI(self.client)
        self.option = ProjectOptions()

    async def all(self, *options: Option) -> List[Project]:
        """
        获取项目列表

        Args:
            options: with_all (管理员获取全部项目) / with_archived (按归档状态过滤)
        """
        params = apply_options(RequestParams(), options)

        resp = await self.client.get("projects", params)
        projects = ProjectList.validate_python(resp.json())
        logger.info("Retrieved %d projects", len(projects))
        return projects

    async def one(self, project_id_or_key: Union[int, str]) -> Project:
        """获取项目"""
        project = id_or_key("projectIdOrKey", project_id_or_key)

        resp = await self.client.get(f"projects/{project}")
        return Project.model_validate(resp.json())

    async def create(self, key: str, name: str, *options: Option) -> Project:
        """
        创建项目

        chartEnabled / subtaskingEnabled 为必填参数，默认 false，可通过选项覆盖。

        Args:
            key: 项目 Key (大写字母、数字、下划线)
            name: 项目名称
            options: ProjectOptions 生成的选项

        Raises:
            InvalidParameterError: key / name 为空或选项校验失败
        """
        params = apply_options(
            RequestParams(),
            [
                text_option("key", key),
                text_option("name", name),
                bool_option("chartEnabled", False),
                bool_option("subtaskingEnabled", False),
                *options,
            ],
        )
        logger.info("Creating project: key=%s, name=%s", key, name)

        resp = await self.client.post("projects", params)
        return Project.model_validate(resp.json())

    async def update(self, project_id_or_key: Union[int, str], *options: Option) -> Project:
        """更新项目"""
        project = id_or_key("projectIdOrKey", project_id_or_key)
        params = apply_options(RequestParams(), options)
        logger.info("Updating project %s: fields=%s", project, list(params))

        resp = await self.client.patch(f"projects/{project}", params)
        return Project.model_validate(resp.json())

    async def delete(self, project_id_or_key: Union[int, str]) -> Project:
        """删除项目，返回被删除的项目"""
        project = id_or_key("projectIdOrKey", project_id_or_key)
        logger.info("Deleting project %s", project)

        resp = await self.client.delete(f"projects/{project}")
        return Project.model_validate(resp.json())
