"""事件名工具测试"""

from pagebridge.events.names import SynonymGroups, alias_names, callback_name, resolve_alias


class TestAliases:
    """别名解析"""

    def test_aliases(self):
        assert resolve_alias("load") == "onLoad"
        assert resolve_alias("unload") == "onUnload"

    def test_other_names_unchanged(self):
        assert resolve_alias("onShow") == "onShow"
        assert resolve_alias("events.onBack") == "events.onBack"

    def test_alias_names(self):
        assert alias_names("onUnload") == ["unload"]
        assert alias_names("onShow") == []


class TestCallbackName:
    """宿主事件名 → Python 方法名"""

    def test_camel_case(self):
        assert callback_name("onShareAppMessage") == "on_share_app_message"
        assert callback_name("onShow") == "on_show"

    def test_before_prefix(self):
        assert callback_name("beforeTabItemTap") == "before_tab_item_tap"

    def test_dotted_host_name(self):
        assert callback_name("events.onResize") == "on_resize"


class TestSynonymGroups:
    """同义事件组"""

    def test_undeclared_expands_to_itself(self):
        groups = SynonymGroups()
        assert groups.expand("onShow") == ["onShow"]
        assert "onShow" not in groups

    def test_alias_expands_to_host_name(self):
        assert SynonymGroups().expand("unload") == ["onUnload"]

    def test_merge_keeps_registration_order(self):
        groups = SynonymGroups({"onResize": ["onResize"]})
        groups.merge({"onResize": ["events.onResize"]})

        assert groups.expand("onResize") == ["onResize", "events.onResize"]
        assert "onResize" in groups

    def test_merge_deduplicates(self):
        groups = SynonymGroups({"onResize": ["onResize"]})
        groups.merge({"onResize": ["onResize"]})
        assert groups.expand("onResize") == ["onResize"]

    def test_to_dict_is_copy(self):
        groups = SynonymGroups({"onBack": ["events.onBack"]})
        data = groups.to_dict()
        data["onBack"].append("onBack")

        assert groups.expand("onBack") == ["events.onBack"]
