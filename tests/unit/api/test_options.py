"""
Functional Options 测试模块

测试覆盖:
1. ActivityOptions - 类型 ID 范围、minId/maxId、count 上下限、order
2. ProjectOptions - 非空字符串、布尔值、文本格式
3. UserOptions - 非空字符串、角色类型
4. WikiOptions - 非空字符串、布尔值
5. 校验失败时不修改 RequestParams
"""

import pytest

from backlog.api.options import (
    ActivityOptions,
    ProjectOptions,
    UserOptions,
    WikiOptions,
    apply_options,
    id_or_key,
    validate_id,
)
from backlog.core.errors import InvalidParameterError
from backlog.core.params import RequestParams
from backlog.schemas.models import Format, Order, Role

ALL_ACTIVITY_TYPES = list(range(1, 27))


class TestActivityOptions:
    """测试 ActivityOptions"""

    @pytest.mark.parametrize(
        "type_ids,want",
        [
            pytest.param([1], ["1"], id="valid-1"),
            pytest.param([26], ["26"], id="valid-26"),
            pytest.param(
                ALL_ACTIVITY_TYPES,
                [str(i) for i in ALL_ACTIVITY_TYPES],
                id="valid-all",
            ),
            pytest.param([1, 1], ["1", "1"], id="duplicate"),
            pytest.param([5, 3, 9], ["5", "3", "9"], id="order-preserved"),
        ],
    )
    def test_with_activity_type_ids_valid(self, type_ids, want):
        """测试合法的活动类型 ID 按顺序写入"""
        params = RequestParams()
        ActivityOptions().with_activity_type_ids(type_ids)(params)
        assert params.getlist("activityTypeId[]") == want

    @pytest.mark.parametrize(
        "type_ids",
        [
            pytest.param([0], id="zero"),
            pytest.param([-1], id="negative"),
            pytest.param([27], id="over"),
            pytest.param(ALL_ACTIVITY_TYPES + [27], id="trailing-invalid"),
            pytest.param([0] + ALL_ACTIVITY_TYPES, id="leading-invalid"),
        ],
    )
    def test_with_activity_type_ids_invalid(self, type_ids):
        """任一越界则整体拒绝，不写入任何值"""
        params = RequestParams()
        with pytest.raises(InvalidParameterError) as exc_info:
            ActivityOptions().with_activity_type_ids(type_ids)(params)

        assert exc_info.value.field == "activityTypeId"
        assert "activityTypeId[]" not in params
        assert len(params) == 0

    def test_with_activity_type_ids_empty(self):
        """空列表为 no-op"""
        params = RequestParams()
        ActivityOptions().with_activity_type_ids([])(params)
        assert params.getlist("activityTypeId[]") is None

    def test_with_activity_type_ids_copies_input(self):
        """构造后修改原列表不影响选项"""
        type_ids = [1, 2]
        option = ActivityOptions().with_activity_type_ids(type_ids)
        type_ids.append(99)

        params = RequestParams()
        option(params)
        assert params.getlist("activityTypeId[]") == ["1", "2"]

    @pytest.mark.parametrize("method,key", [("with_min_id", "minId"), ("with_max_id", "maxId")])
    def test_with_min_max_id(self, method, key):
        """测试 minId / maxId 写入十进制文本"""
        params = RequestParams()
        getattr(ActivityOptions(), method)(5)(params)
        assert params.get(key) == "5"

    @pytest.mark.parametrize("method", ["with_min_id", "with_max_id"])
    @pytest.mark.parametrize("value", [0, -1])
    def test_with_min_max_id_invalid(self, method, value):
        """测试 minId / maxId 小于 1"""
        params = RequestParams()
        with pytest.raises(InvalidParameterError):
            getattr(ActivityOptions(), method)(value)(params)
        assert len(params) == 0

    @pytest.mark.parametrize("count", [1, 50, 100])
    def test_with_count_valid(self, count):
        """测试 count 边界值 1 和 100"""
        params = RequestParams()
        ActivityOptions().with_count(count)(params)
        assert params.get("count") == str(count)

    @pytest.mark.parametrize("count", [0, -1, 101])
    def test_with_count_invalid(self, count):
        """测试 count 越界"""
        params = RequestParams()
        with pytest.raises(InvalidParameterError) as exc_info:
            ActivityOptions().with_count(count)(params)
        assert exc_info.value.field == "count"
        assert "count" not in params

    @pytest.mark.parametrize(
        "order,want",
        [(Order.ASC, "asc"), (Order.DESC, "desc"), ("asc", "asc"), ("desc", "desc")],
    )
    def test_with_order_valid(self, order, want):
        """测试 order 接受 asc / desc"""
        params = RequestParams()
        ActivityOptions().with_order(order)(params)
        assert params.get("order") == want

    @pytest.mark.parametrize("order", ["test", "", "ASC"])
    def test_with_order_invalid(self, order):
        """测试 order 拒绝其它取值"""
        params = RequestParams()
        with pytest.raises(InvalidParameterError):
            ActivityOptions().with_order(order)(params)
        assert "order" not in params


class TestProjectOptions:
    """测试 ProjectOptions"""

    @pytest.mark.parametrize("method,key", [("with_key", "key"), ("with_name", "name")])
    def test_text_options(self, method, key):
        """测试 key / name 写入"""
        params = RequestParams()
        getattr(ProjectOptions(), method)("TEST")(params)
        assert params.get(key) == "TEST"

    @pytest.mark.parametrize("method", ["with_key", "with_name"])
    def test_text_options_empty(self, method):
        """测试 key / name 为空"""
        params = RequestParams()
        with pytest.raises(InvalidParameterError):
            getattr(ProjectOptions(), method)("")(params)
        assert len(params) == 0

    @pytest.mark.parametrize(
        "method,key",
        [
            ("with_chart_enabled", "chartEnabled"),
            ("with_subtasking_enabled", "subtaskingEnabled"),
            (
                "with_project_leader_can_edit_project_leader",
                "projectLeaderCanEditProjectLeader",
            ),
            ("with_archived", "archived"),
            ("with_all", "all"),
        ],
    )
    @pytest.mark.parametrize("enabled,want", [(True, "true"), (False, "false")])
    def test_bool_options(self, method, key, enabled, want):
        """测试布尔选项写入 true / false"""
        params = RequestParams()
        getattr(ProjectOptions(), method)(enabled)(params)
        assert params.get(key) == want

    @pytest.mark.parametrize(
        "format,want",
        [(Format.BACKLOG, "backlog"), (Format.MARKDOWN, "markdown"), ("markdown", "markdown")],
    )
    def test_with_text_formatting_rule_valid(self, format, want):
        """测试文本格式接受 backlog / markdown"""
        params = RequestParams()
        ProjectOptions().with_text_formatting_rule(format)(params)
        assert params.get("textFormattingRule") == want

    @pytest.mark.parametrize("format", ["test", ""])
    def test_with_text_formatting_rule_invalid(self, format):
        """测试文本格式拒绝其它取值"""
        params = RequestParams()
        with pytest.raises(InvalidParameterError) as exc_info:
            ProjectOptions().with_text_formatting_rule(format)(params)
        assert exc_info.value.field == "textFormattingRule"
        assert len(params) == 0


class TestUserOptions:
    """测试 UserOptions"""

    @pytest.mark.parametrize("password", ["password", "@password#1234"])
    def test_with_password(self, password):
        """测试密码原样写入"""
        params = RequestParams()
        UserOptions().with_password(password)(params)
        assert params.get("password") == password

    @pytest.mark.parametrize(
        "method", ["with_password", "with_name", "with_mail_address"]
    )
    def test_text_options_empty(self, method):
        """测试字符串选项为空"""
        params = RequestParams()
        with pytest.raises(InvalidParameterError) as exc_info:
            getattr(UserOptions(), method)("")(params)
        assert "must not be empty" in str(exc_info.value)
        assert len(params) == 0

    @pytest.mark.parametrize(
        "mail_address", ["mail@test.com", "mail_test@test.com", "mail-test@test.com"]
    )
    def test_with_mail_address(self, mail_address):
        """测试邮箱写入"""
        params = RequestParams()
        UserOptions().with_mail_address(mail_address)(params)
        assert params.get("mailAddress") == mail_address

    @pytest.mark.parametrize(
        "role_type,want",
        [
            (Role.ADMINISTRATOR, "1"),
            (Role.NORMAL_USER, "2"),
            (Role.REPORTER, "3"),
            (Role.VIEWER, "4"),
            (Role.GUEST_REPORTER, "5"),
            (Role.GUEST_VIEWER, "6"),
        ],
    )
    def test_with_role_type_valid(self, role_type, want):
        """测试全部角色类型"""
        params = RequestParams()
        UserOptions().with_role_type(role_type)(params)
        assert params.get("roleType") == want

    @pytest.mark.parametrize("role_type", [0, -1, 7])
    def test_with_role_type_invalid(self, role_type):
        """测试角色类型越界"""
        params = RequestParams()
        with pytest.raises(InvalidParameterError) as exc_info:
            UserOptions().with_role_type(role_type)(params)
        assert exc_info.value.field == "roleType"
        assert "roleType" not in params


class TestWikiOptions:
    """测试 WikiOptions"""

    @pytest.mark.parametrize("method,key", [("with_name", "name"), ("with_content", "content")])
    def test_text_options(self, method, key):
        """测试 name / content 写入"""
        params = RequestParams()
        getattr(WikiOptions(), method)("test")(params)
        assert params.get(key) == "test"

    @pytest.mark.parametrize("method", ["with_name", "with_content"])
    def test_text_options_empty(self, method):
        """测试 name / content 为空"""
        with pytest.raises(InvalidParameterError):
            getattr(WikiOptions(), method)("")(RequestParams())

    @pytest.mark.parametrize("enabled,want", [(True, "true"), (False, "false")])
    def test_with_mail_notify(self, enabled, want):
        """测试 mailNotify 写入 true / false"""
        params = RequestParams()
        WikiOptions().with_mail_notify(enabled)(params)
        assert params.get("mailNotify") == want


class TestHelpers:
    """测试 apply_options / id_or_key"""

    def test_apply_options_overwrites_key(self):
        """测试同一 key 后写覆盖先写"""
        o = UserOptions()
        params = apply_options(RequestParams(), [o.with_name("a"), o.with_name("b")])
        assert params.getlist("name") == ["b"]

    def test_apply_options_stops_at_first_error(self):
        """测试遇到第一个错误即停止"""
        o = UserOptions()
        with pytest.raises(InvalidParameterError) as exc_info:
            apply_options(
                RequestParams(), [o.with_name("a"), o.with_password(""), o.with_role_type(0)]
            )
        assert exc_info.value.field == "password"

    @pytest.mark.parametrize("value,want", [(1, "1"), (1234, "1234"), ("TEST", "TEST")])
    def test_id_or_key_valid(self, value, want):
        """测试 ID 与 Key 转换为路径片段"""
        assert id_or_key("projectIdOrKey", value) == want

    @pytest.mark.parametrize("value", [0, -1, ""])
    def test_id_or_key_invalid(self, value):
        """测试 ID 小于 1 或 Key 为空"""
        with pytest.raises(InvalidParameterError) as exc_info:
            id_or_key("projectIdOrKey", value)
        assert exc_info.value.field == "projectIdOrKey"


class TestIntegerTypeCheck:
    """测试数值参数的类型校验：bool 与字符串均被拒绝"""

    @pytest.mark.parametrize("count", [True, False, "5", 5.0, None])
    def test_with_count_non_integer(self, count):
        """测试 count 非整数时抛出 InvalidParameterError"""
        params = RequestParams()
        with pytest.raises(InvalidParameterError) as exc_info:
            ActivityOptions().with_count(count)(params)
        assert exc_info.value.field == "count"
        assert "must be an integer" in str(exc_info.value)
        assert "count" not in params

    @pytest.mark.parametrize("type_ids", [["5"], [True], [1, "2"], [1, False]])
    def test_with_activity_type_ids_non_integer(self, type_ids):
        """测试活动类型 ID 含非整数元素时整体拒绝"""
        params = RequestParams()
        with pytest.raises(InvalidParameterError) as exc_info:
            ActivityOptions().with_activity_type_ids(type_ids)(params)
        assert exc_info.value.field == "activityTypeId"
        assert len(params) == 0

    @pytest.mark.parametrize("method", ["with_min_id", "with_max_id"])
    @pytest.mark.parametrize("value", [True, "5"])
    def test_with_min_max_id_non_integer(self, method, value):
        """测试 minId / maxId 非整数时抛出 InvalidParameterError"""
        params = RequestParams()
        with pytest.raises(InvalidParameterError):
            getattr(ActivityOptions(), method)(value)(params)
        assert len(params) == 0

    @pytest.mark.parametrize("role_type", [True, "1"])
    def test_with_role_type_non_integer(self, role_type):
        """测试 roleType 为 True 时不会被当作管理员"""
        params = RequestParams()
        with pytest.raises(InvalidParameterError) as exc_info:
            UserOptions().with_role_type(role_type)(params)
        assert exc_info.value.field == "roleType"
        assert "roleType" not in params

    @pytest.mark.parametrize("value", [True, False, None, 1.5])
    def test_id_or_key_rejects_other_types(self, value):
        """测试 id_or_key 拒绝 bool 及非 int / str 类型"""
        with pytest.raises(InvalidParameterError) as exc_info:
            id_or_key("projectIdOrKey", value)
        assert exc_info.value.field == "projectIdOrKey"

    def test_validate_id_rejects_bool(self):
        """测试 validate_id 不接受 True (即使 True == 1)"""
        with pytest.raises(InvalidParameterError) as exc_info:
            validate_id("userId", True)
        assert exc_info.value.constraint == "must be an integer, got True"
