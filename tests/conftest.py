import logging
import sys

import pytest

from backlog.core import client as client_module

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
# httpcore 的连接级 DEBUG 日志过多
for noisy in ("httpcore", "httpx"):
    logging.getLogger(noisy).setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@pytest.fixture(autouse=True)
def log_test_start(request):
    """每个用例前后打印分隔日志，便于在 DEBUG 输出中定位"""
    logger.info("-" * 60)
    logger.info("Running %s", request.node.nodeid)
    yield
    logger.info("Finished %s", request.node.nodeid)


@pytest.fixture(autouse=True)
def reset_backlog_client(monkeypatch):
    """隔离全局 BacklogClient 单例，避免用例之间共享传输层"""
    monkeypatch.setattr(client_module, "_backlog_client", None)
