from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, TypeAdapter


class Role(IntEnum):
    ADMINISTRATOR = 1
    NORMAL_USER = 2
    REPORTER = 3
    VIEWER = 4
    GUEST_REPORTER = 5
    GUEST_VIEWER = 6


class Order(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Format(str, Enum):
    BACKLOG = "backlog"
    MARKDOWN = "markdown"


class BacklogModel(BaseModel):
    # Backlog 返回 camelCase 字段，通过 alias 映射；未知字段忽略以兼容后续版本
    model_config = {"extra": "ignore", "populate_by_name": True}


class User(BacklogModel):
    id: int
    user_id: Optional[str] = Field(default=None, alias="userId")
    name: str
    role_type: Role = Field(alias="roleType")
    lang: Optional[str] = None
    mail_address: Optional[str] = Field(default=None, alias="mailAddress")
    last_login_time: Optional[datetime] = Field(default=None, alias="lastLoginTime")


class Attachment(BacklogModel):
    id: int
    name: str
    size: int
    created_user: Optional[User] = Field(default=None, alias="createdUser")
    created: Optional[datetime] = None


class Project(BacklogModel):
    id: int
    project_key: str = Field(alias="projectKey")
    name: str
    chart_enabled: bool = Field(default=False, alias="chartEnabled")
    subtasking_enabled: bool = Field(default=False, alias="subtaskingEnabled")
    project_leader_can_edit_project_leader: bool = Field(
        default=False, alias="projectLeaderCanEditProjectLeader"
    )
    text_formatting_rule: Optional[Format] = Field(
        default=None, alias="textFormattingRule"
    )
    archived: bool = False
    display_order: Optional[int] = Field(default=None, alias="displayOrder")


class Tag(BacklogModel):
    id: int
    name: str


class Wiki(BacklogModel):
    id: int
    project_id: int = Field(alias="projectId")
    name: str
    content: Optional[str] = None
    tags: List[Tag] = Field(default_factory=list)
    attachments: List[Attachment] = Field(default_factory=list)
    created_user: Optional[User] = Field(default=None, alias="createdUser")
    created: Optional[datetime] = None
    updated_user: Optional[User] = Field(default=None, alias="updatedUser")
    updated: Optional[datetime] = None


class Activity(BacklogModel):
    id: int
    project: Optional[Project] = None
    type: int
    # content 的结构随活动类型变化，保持原始 dict
    content: Dict[str, Any] = Field(default_factory=dict)
    created_user: Optional[User] = Field(default=None, alias="createdUser")
    created: Optional[datetime] = None


class Space(BacklogModel):
    space_key: str = Field(alias="spaceKey")
    name: str
    owner_id: Optional[int] = Field(default=None, alias="ownerId")
    lang: Optional[str] = None
    timezone: Optional[str] = None
    text_formatting_rule: Optional[Format] = Field(
        default=None, alias="textFormattingRule"
    )
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


class DiskUsage(BacklogModel):
    capacity: int
    issue: int = 0
    wiki: int = 0
    file: int = 0
    subversion: int = 0
    git: int = 0
    git_lfs: int = Field(default=0, alias="gitLFS")


class SpaceNotification(BacklogModel):
    content: Optional[str] = None
    updated: Optional[datetime] = None


class Issue(BacklogModel):
    id: int
    project_id: int = Field(alias="projectId")
    issue_key: str = Field(alias="issueKey")
    key_id: int = Field(alias="keyId")
    summary: str
    description: Optional[str] = None
    attachments: List[Attachment] = Field(default_factory=list)
    created_user: Optional[User] = Field(default=None, alias="createdUser")
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


# 列表响应解码器
AttachmentList = TypeAdapter(List[Attachment])
UserList = TypeAdapter(List[User])
ProjectList = TypeAdapter(List[Project])
WikiList = TypeAdapter(List[Wiki])
TagList = TypeAdapter(List[Tag])
ActivityList = TypeAdapter(List[Activity])
