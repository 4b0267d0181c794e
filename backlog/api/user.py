"""
UserAPI - 用户相关接口

- 用户: GET/POST /api/v2/users, GET/PATCH/DELETE /api/v2/users/:userId, GET /api/v2/users/myself
- 项目成员: GET/POST/DELETE /api/v2/projects/:projectIdOrKey/users
- 项目管理员: GET/POST/DELETE /api/v2/projects/:projectIdOrKey/administrators
"""

import logging
from typing import List, Optional, Union

from backlog.api.activity import UserActivityAPI
from backlog.api.options import (
    Option,
    UserOptions,
    apply_options,
    bool_option,
    id_option,
    id_or_key,
    text_option,
    validate_id,
)
from backlog.core.client import BacklogClient, get_backlog_client
from backlog.core.params import RequestParams
from backlog.schemas.models import Role, User, UserList

logger = logging.getLogger(__name__)


class UserAPI:
    """
    Backlog 用户 API 封装

    子服务:
    - activity: 用户的最近活动
    - option: 更新用户时使用的选项 (UserOptions)
    """

    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()
        self.activity = UserActivityAPI(self.client)
        self.option = UserOptions()

    async def all(self) -> List[User]:
        """获取空间内的全部用户"""
        resp = await self.client.get("users")
        users = UserList.validate_python(resp.json())
        logger.info("Retrieved %d users", len(users))
        return users

    async def one(self, id: int) -> User:
        """
        获取用户

        Args:
            id: 用户 ID (数值)，必须 >= 1

        Raises:
            InvalidParameterError: id < 1（不会发起请求）
        """
        validate_id("id", id)
        resp = await self.client.get(f"users/{id}")
        return User.model_validate(resp.json())

    async def own(self) -> User:
        """获取当前认证用户"""
        resp = await self.client.get("users/myself")
        return User.model_validate(resp.json())

    async def add(
        self,
        user_id: str,
        password: str,
        name: str,
        mail_address: str,
        role_type: Union[Role, int],
    ) -> User:
        """
        添加用户

        Args:
            user_id: 登录名
            password: 密码
            name: 显示名
            mail_address: 邮箱
            role_type: 角色

        Returns:
            新建的用户

        Raises:
            InvalidParameterError: 任一字符串参数为空或 role_type 不合法
        """
        params = apply_options(
            RequestParams(),
            [
                text_option("userId", user_id),
                self.option.with_password(password),
                self.option.with_name(name),
                self.option.with_mail_address(mail_address),
                self.option.with_role_type(role_type),
            ],
        )
        logger.info("Adding user: user_id=%s, role_type=%s", user_id, role_type)

        resp = await self.client.post("users", params)
        return User.model_validate(resp.json())

    async def update(self, id: int, *options: Option) -> User:
        """
        更新用户

        Args:
            id: 用户 ID
            options: UserOptions 生成的选项

        Raises:
            InvalidParameterError: id 或选项校验失败（不会发起请求）
        """
        validate_id("id", id)
        params = apply_options(RequestParams(), options)
        logger.info("Updating user %d: fields=%s", id, list(params))

        resp = await self.client.patch(f"users/{id}", params)
        return User.model_validate(resp.json())

    async def delete(self, id: int) -> User:
        """删除用户，返回被删除的用户"""
        validate_id("id", id)
        logger.info("Deleting user %d", id)

        resp = await self.client.delete(f"users/{id}")
        return User.model_validate(resp.json())


class ProjectUserAPI:
    """项目成员与项目管理员"""

    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()

    async def all(
        self, project_id_or_key: Union[int, str], exclude_group_members: bool = False
    ) -> List[User]:
        """
        获取项目成员

        Args:
            project_id_or_key: 项目 ID 或 Key
            exclude_group_members: 是否排除通过群组加入的成员
        """
        project = id_or_key("projectIdOrKey", project_id_or_key)
        params = apply_options(
            RequestParams(), [bool_option("excludeGroupMembers", exclude_group_members)]
        )

        resp = await self.client.get(f"projects/{project}/users", params)
        users = UserList.validate_python(resp.json())
        logger.info("Retrieved %d members of project %s", len(users), project)
        return users

    async def add(self, project_id_or_key: Union[int, str], user_id: int) -> User:
        """添加项目成员"""
        project = id_or_key("projectIdOrKey", project_id_or_key)
        params = apply_options(RequestParams(), [id_option("userId", user_id)])

        resp = await self.client.post(f"projects/{project}/users", params)
        return User.model_validate(resp.json())

    async def delete(self, project_id_or_key: Union[int, str], user_id: int) -> User:
        """移除项目成员"""
        project = id_or_key("projectIdOrKey", project_id_or_key)
        params = apply_options(RequestParams(), [id_option("userId", user_id)])

        resp = await self.client.delete(f"projects/{project}/users", params)
        return User.model_validate(resp.json())

    async def add_admin(self, project_id_or_key: Union[int, str], user_id: int) -> User:
        """添加项目管理员"""
        project = id_or_key("projectIdOrKey", project_id_or_key)
        params = apply_options(RequestParams(), [id_option("userId", user_id)])

        resp = await self.client.post(f"projects/{project}/administrators", params)
        return User.model_validate(resp.json())

    async def admin_all(self, project_id_or_key: Union[int, str]) -> List[User]:
        """获取项目管理员列表"""
        project = id_or_key("projectIdOrKey", project_id_or_key)

        resp = await self.client.get(f"projects/{project}/administrators")
        return UserList.validate_python(resp.json())

    async def delete_admin(
        self, project_id_or_key: Union[int, str], user_id: int
    ) -> User:
        """移除项目管理员"""
        project = id_or_key("projectIdOrKey", project_id_or_key)
        params = apply_options(RequestParams(), [id_option("userId", user_id)])

        resp = await self.client.delete(f"projects/{project}/administrators", params)
        return User.model_validate(resp.json())
