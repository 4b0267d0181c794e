"""Backlog REST API 异步客户端"""

from backlog.api import BacklogAPI
from backlog.core.client import BacklogClient, get_backlog_client
from backlog.core.errors import APIResponseError, BacklogError, InvalidParameterError
from backlog.core.params import RequestParams
from backlog.schemas.models import Format, Order, Role

__all__ = [
    "BacklogAPI",
    "BacklogClient",
    "get_backlog_client",
    "BacklogError",
    "InvalidParameterError",
    "APIResponseError",
    "RequestParams",
    "Role",
    "Order",
    "Format",
]
