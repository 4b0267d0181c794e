"""
AttachmentAPI - 附件相关接口

- 空间: POST /api/v2/space/attachment (multipart 上传)
- Wiki: GET/POST /api/v2/wikis/:wikiId/attachments, DELETE .../:attachmentId
- 课题: GET /api/v2/issues/:issueIdOrKey/attachments, DELETE .../:attachmentId
- Pull Request: GET /api/v2/projects/:projectIdOrKey/git/repositories/:repoIdOrName/pullRequests/:number/attachments
"""

import logging
from typing import List, Optional, Union

from backlog.api.options import id_or_key, validate_id, validate_text
from backlog.core.client import BacklogClient, get_backlog_client
from backlog.core.params import RequestParams
from backlog.schemas.models import Attachment, AttachmentList

logger = logging.getLogger(__name__)


async def list_attachments(client, spath: str) -> List[Attachment]:
    resp = await client.get(spath)
    attachments = AttachmentList.validate_python(resp.json())
    logger.info("Retrieved %d attachments from %s", len(attachments), spath)
    return attachments


async def remove_attachment(client, spath: str) -> Attachment:
    logger.info("Removing attachment: %s", spath)
    resp = await client.delete(spath)
    return Attachment.model_validate(resp.json())


class SpaceAttachmentAPI:
    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()

    async def upload(self, fpath: str, fname: str) -> Attachment:
        """
        上传文件到空间

        上传后的文件可通过 WikiAttachmentAPI.attach 等接口关联到资源。

        Args:
            fpath: 本地文件路径，不能为空
            fname: 文件名，不能为空

        Returns:
            上传得到的附件 (仅包含 id / name / size)

        Raises:
            InvalidParameterError: fpath 或 fname 为空
        """
        validate_text("fpath", fpath)
        validate_text("fname", fname)

        resp = await self.client.upload("space/attachment", fpath, fname)
        attachment = Attachment.model_validate(resp.json())
        logger.info("Uploaded %s as attachment %d", fname, attachment.id)
        return attachment


class WikiAttachmentAPI:
    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()

    async def attach(self, wiki_id: int, attachment_ids: List[int]) -> List[Attachment]:
        """
        将已上传到空间的文件关联到 Wiki

        Args:
            wiki_id: Wiki ID
            attachment_ids: SpaceAttachmentAPI.upload 返回的附件 ID 列表

        Returns:
            已关联的附件列表
        """
        validate_id("wikiId", wiki_id)
        params = RequestParams()
        for attachment_id in attachment_ids:
            validate_id("attachmentId", attachment_id)
            params.add("attachmentId[]", str(attachment_id))

        resp = await self.client.post(f"wikis/{wiki_id}/attachments", params)
        attachments = AttachmentList.validate_python(resp.json())
        logger.info("Attached %d files to wiki %d", len(attachments), wiki_id)
        return attachments

    async def list(self, wiki_id: int) -> List[Attachment]:
        """获取 Wiki 的附件列表"""
        validate_id("wikiId", wiki_id)
        return await list_attachments(self.client, f"wikis/{wiki_id}/attachments")

    async def remove(self, wiki_id: int, attachment_id: int) -> Attachment:
        """删除 Wiki 的附件，返回被删除的附件"""
        validate_id("wikiId", wiki_id)
        validate_id("attachmentId", attachment_id)
        return await remove_attachment(
            self.client, f"wikis/{wiki_id}/attachments/{attachment_id}"
        )


class IssueAttachmentAPI:
    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()

    async def list(self, issue_id_or_key: Union[int, str]) -> List[Attachment]:
        """获取课题的附件列表"""
        issue = id_or_key("issueIdOrKey", issue_id_or_key)
        return await list_attachments(self.client, f"issues/{issue}/attachments")

    async def remove(
        self, issue_id_or_key: Union[int, str], attachment_id: int
    ) -> Attachment:
        """删除课题的附件"""
        issue = id_or_key("issueIdOrKey", issue_id_or_key)
        validate_id("attachmentId", attachment_id)
        return await remove_attachment(
            self.client, f"issues/{issue}/attachments/{attachment_id}"
        )


class PullRequestAttachmentAPI:
    def __init__(self, client: Optional[BacklogClient] = None):
        self.client = client or get_backlog_client()

    @staticmethod
    def _spath(
        project_id_or_key: Union[int, str],
        repo_id_or_name: Union[int, str],
        pr_number: int,
    ) -> str:
        project = id_or_key("projectIdOrKey", project_id_or_key)
        repo = id_or_key("repoIdOrName", repo_id_or_name)
        validate_id("number", pr_number)
        return (
            f"projects/{project}/git/repositories/{repo}"
            f"/pullRequests/{pr_number}/attachments"
        )

    async def list(
        self,
        project_id_or_key: Union[int, str],
        repo_id_or_name: Union[int, str],
        pr_number: int,
    ) -> List[Attachment]:
        """获取 Pull Request 的附件列表"""
        spath = self._spath(project_id_or_key, repo_id_or_name, pr_number)
        return await list_attachments(self.client, spath)

    async def remove(
        self,
        project_id_or_key: Union[int, str],
        repo_id_or_name: Union[int, str],
        pr_number: int,
        attachment_id: int,
    ) -> Attachment:
        """删除 Pull Request 的附件"""
        spath = self._spath(project_id_or_key, repo_id_or_name, pr_number)
        validate_id("attachmentId", attachment_id)
        return await remove_attachment(self.client, f"{spath}/{attachment_id}")
