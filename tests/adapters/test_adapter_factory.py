"""Tests for adapter factory and platform declarations"""

from unittest.mock import MagicMock

import pytest

from pagebridge.adapters import (
    AlipayAdapter,
    PlatformAdapter,
    ToutiaoAdapter,
    WechatAdapter,
    create_adapter,
    create_adapters,
    detect_targets,
)


class TestCreateAdapter:
    """Test create_adapter function"""

    def test_create_wechat(self):
        adapter = create_adapter("wechat")
        assert isinstance(adapter, WechatAdapter)
        assert adapter.name == "wechat"

    def test_create_alipay(self):
        assert isinstance(create_adapter("alipay"), AlipayAdapter)

    def test_create_toutiao(self):
        assert isinstance(create_adapter("toutiao"), ToutiaoAdapter)

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError, match="Unknown adapter type"):
            create_adapter("quickapp")

    def test_host_passed_to_adapter(self):
        host = MagicMock()
        adapter = create_adapter("wechat", host=host)

        adapter.stop_pull_down_refresh()

        host.stopPullDownRefresh.assert_called_once_with()


class TestCreateAdapters:
    """Test create_adapters function"""

    def test_keeps_target_order(self):
        adapters = create_adapters(["alipay", "wechat"])
        assert [adapter.name for adapter in adapters] == ["alipay", "wechat"]

    def test_targets_from_environment(self, monkeypatch):
        monkeypatch.setenv("PAGEBRIDGE_TARGETS", "wechat, toutiao")
        adapters = create_adapters()
        assert [adapter.name for adapter in adapters] == ["wechat", "toutiao"]


class TestDetectTargets:
    """Test detect_targets function"""

    def test_environment_variable(self, monkeypatch):
        monkeypatch.setenv("PAGEBRIDGE_TARGETS", "alipay,,wechat ")
        assert detect_targets() == ["alipay", "wechat"]

    def test_default_from_config(self, monkeypatch):
        monkeypatch.delenv("PAGEBRIDGE_TARGETS", raising=False)
        monkeypatch.setattr("pagebridge.config.TARGETS", ["toutiao"])
        assert detect_targets() == ["toutiao"]


class TestPlatformAdapter:
    """Test PlatformAdapter defaults"""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            PlatformAdapter()

    def test_stop_pull_down_refresh_without_host(self):
        WechatAdapter().stop_pull_down_refresh()

    def test_default_transforms_return_config(self):
        config = {"route": "pages/a"}
        adapter = WechatAdapter()
        assert adapter.transform_page_config(config) is config
        assert adapter.transform_app_config(config) is config

    def test_wechat_declares_top_level_synonyms(self):
        assert WechatAdapter().synonyms == {
            "onTabItemTap": ["onTabItemTap"],
            "onResize": ["onResize"],
        }

    def test_toutiao_merges_share_results(self):
        adapter = ToutiaoAdapter()
        assert adapter.result_policies == {"onShareAppMessage": "merge"}
        assert adapter.transform_app_config({})["platform"] == "toutiao"

    def test_repr(self):
        assert repr(AlipayAdapter()) == "<AlipayAdapter alipay>"
