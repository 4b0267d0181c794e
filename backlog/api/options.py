"""
请求参数选项 (Functional Options)

每个 with_* 方法返回一个 Option：接收 RequestParams，校验输入后写入恰好一个 key。
校验失败时抛出 InvalidParameterError，且不修改 RequestParams。

使用示例:
    o = backlog.user.option
    user = await backlog.user.update(1, o.with_name("alice"), o.with_role_type(Role.VIEWER))
"""

from typing import Callable, Iterable, List, Union

from backlog.core.errors import InvalidParameterError
from backlog.core.params import RequestParams
from backlog.schemas.models import Format, Order, Role


Option = Callable[[RequestParams], None]

ACTIVITY_TYPE_ID_MIN = 1
ACTIVITY_TYPE_ID_MAX = 26
COUNT_MAX = 100


def validate_int(field: str, value: int) -> None:
    # bool 是 int 的子类，需单独排除
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(field, f"must be an integer, got {value!r}")


def validate_id(field: str, value: int) -> None:
    """数值 ID 必须为 >= 1 的整数"""
    validate_int(field, value)
    if value < 1:
        raise InvalidParameterError(field, f"must be 1 or more, got {value}")


def validate_text(field: str, value: str) -> None:
    if not value:
        raise InvalidParameterError(field, "must not be empty")


def id_or_key(field: str, value: Union[int, str]) -> str:
    """
    将 "ID 或 Key" 形式的标识转换为路径片段

    int 视为 ID (须 >= 1)，str 视为 Key (须非空)。bool 及其它类型一律拒绝。
    """
    if isinstance(value, bool):
        raise InvalidParameterError(field, f"must be an ID or a key, got {value!r}")
    if isinstance(value, int):
        validate_id(field, value)
        return str(value)
    if not isinstance(value, str):
        raise InvalidParameterError(field, f"must be an ID or a key, got {value!r}")
    validate_text(field, value)
    return value


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def text_option(key: str, value: str) -> Option:
    """非空字符串参数"""

    def option(params: RequestParams) -> None:
        validate_text(key, value)
        params.set(key, value)

    return option


def id_option(key: str, value: int) -> Option:
    """数值 ID 参数 (>= 1)"""

    def option(params: RequestParams) -> None:
        validate_id(key, value)
        params.set(key, str(value))

    return option


def bool_option(key: str, value: bool) -> Option:
    """布尔参数，总是成功，写入 "true" / "false" """

    def option(params: RequestParams) -> None:
        params.set(key, format_bool(value))

    return option


def apply_options(params: RequestParams, options: Iterable[Option]) -> RequestParams:
    """依次应用选项，遇到第一个校验错误即抛出"""
    for option in options:
        option(params)
    return params


class ActivityOptions:
    """最近活动 (activities) 查询选项"""

    def with_activity_type_ids(self, type_ids: List[int]) -> Option:
        """
        按活动类型过滤 (activityTypeId[])

        所有 ID 必须在 [1, 26] 内；任一越界则整体拒绝，不写入任何值。
        空列表不写入任何参数。
        """
        type_ids = list(type_ids)

        def option(params: RequestParams) -> None:
            for type_id in type_ids:
                validate_int("activityTypeId", type_id)
                if not ACTIVITY_TYPE_ID_MIN <= type_id <= ACTIVITY_TYPE_ID_MAX:
                    raise InvalidParameterError(
                        "activityTypeId",
                        f"must be between {ACTIVITY_TYPE_ID_MIN} and "
                        f"{ACTIVITY_TYPE_ID_MAX}, got {type_id}",
                    )
            if type_ids:
                params.setlist("activityTypeId[]", [str(i) for i in type_ids])

        return option

    def with_min_id(self, min_id: int) -> Option:
        return id_option("minId", min_id)

    def with_max_id(self, max_id: int) -> Option:
        return id_option("maxId", max_id)

    def with_count(self, count: int) -> Option:
        """返回条数，1 ~ 100"""

        def option(params: RequestParams) -> None:
            validate_int("count", count)
            if not 1 <= count <= COUNT_MAX:
                raise InvalidParameterError(
                    "count", f"must be between 1 and {COUNT_MAX}, got {count}"
                )
            params.set("count", str(count))

        return option

    def with_order(self, order: Union[Order, str]) -> Option:
        """排序方向，只接受 "asc" / "desc" """

        def option(params: RequestParams) -> None:
            try:
                value = Order(order)
            except ValueError:
                raise InvalidParameterError(
                    "order", f"must be 'asc' or 'desc', got {order!r}"
                ) from None
            params.set("order", value.value)

        return option


class ProjectOptions:
    """项目创建 / 更新 / 列表选项"""

    def with_key(self, key: str) -> Option:
        return text_option("key", key)

    def with_name(self, name: str) -> Option:
        return text_option("name", name)

    def with_chart_enabled(self, enabled: bool) -> Option:
        return bool_option("chartEnabled", enabled)

    def with_subtasking_enabled(self, enabled: bool) -> Option:
        return bool_option("subtaskingEnabled", enabled)

    def with_project_leader_can_edit_project_leader(self, enabled: bool) -> Option:
        return bool_option("projectLeaderCanEditProjectLeader", enabled)

    def with_text_formatting_rule(self, format: Union[Format, str]) -> Option:
        """文本格式，只接受 "backlog" / "markdown" """

        def option(params: RequestParams) -> None:
            try:
                value = Format(format)
            except ValueError:
                raise InvalidParameterError(
                    "textFormattingRule",
                    f"must be 'backlog' or 'markdown', got {format!r}",
                ) from None
            params.set("textFormattingRule", value.value)

        return option

    def with_archived(self, archived: bool) -> Option:
        return bool_option("archived", archived)

    def with_all(self, enabled: bool) -> Option:
        """管理员获取空间内全部项目"""
        return bool_option("all", enabled)


class UserOptions:
    """用户更新选项"""

    def with_password(self, password: str) -> Option:
        return text_option("password", password)

    def with_name(self, name: str) -> Option:
        return text_option("name", name)

    def with_mail_address(self, mail_address: str) -> Option:
        # TODO: 校验邮箱格式，目前只检查非空
        return text_option("mailAddress", mail_address)

    def with_role_type(self, role_type: Union[Role, int]) -> Option:
        """角色类型，只接受 1 ~ 6"""

        def option(params: RequestParams) -> None:
            validate_int("roleType", role_type)
            try:
                value = Role(role_type)
            except ValueError:
                raise InvalidParameterError(
                    "roleType", f"must be between 1 and 6, got {role_type!r}"
                ) from None
            params.set("roleType", str(value.value))

        return option


class WikiOptions:
    """Wiki 创建 / 更新 / 删除选项"""

    def with_name(self, name: str) -> Option:
        return text_option("name", name)

    def with_content(self, content: str) -> Option:
        return text_option("content", content)

    def with_mail_notify(self, enabled: bool) -> Option:
        return bool_option("mailNotify", enabled)
