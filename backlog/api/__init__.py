"""
Backlog API 层 - 资源服务封装

每个资源服务对应 Backlog REST API (/api/v2/) 的一组接口:
- UserAPI / ProjectUserAPI: 用户、项目成员
- ProjectAPI: 项目
- WikiAPI: Wiki
- SpaceAPI: 空间
- IssueAPI / PullRequestAPI: 课题、Pull Request
- *AttachmentAPI: 各资源的附件
- *ActivityAPI: 各资源的最近活动

BacklogAPI 把它们组合到同一个传输层 client 上。
"""

from .activity import ProjectActivityAPI, SpaceActivityAPI, UserActivityAPI
from .attachment import (
    IssueAttachmentAPI,
    PullRequestAttachmentAPI,
    SpaceAttachmentAPI,
    WikiAttachmentAPI,
)
from .backlog import BacklogAPI
from .issue import IssueAPI, PullRequestAPI
from .options import ActivityOptions, Option, ProjectOptions, UserOptions, WikiOptions
from .project import ProjectAPI
from .space import SpaceAPI
from .user import ProjectUserAPI, UserAPI
from .wiki import WikiAPI

__all__ = [
    "BacklogAPI",
    "UserAPI",
    "ProjectUserAPI",
    "ProjectAPI",
    "WikiAPI",
    "SpaceAPI",
    "IssueAPI",
    "PullRequestAPI",
    "SpaceAttachmentAPI",
    "WikiAttachmentAPI",
    "IssueAttachmentAPI",
    "PullRequestAttachmentAPI",
    "SpaceActivityAPI",
    "ProjectActivityAPI",
    "UserActivityAPI",
    "Option",
    "ActivityOptions",
    "ProjectOptions",
    "UserOptions",
    "WikiOptions",
]
