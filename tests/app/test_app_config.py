"""应用配置与全局 app 测试"""

import pytest

from pagebridge import clear_global_app, create_app_config, get_app
from pagebridge.adapters import ToutiaoAdapter, WechatAdapter
from pagebridge.exceptions import AppNotReadyError, DispatchError
from pagebridge.runtime import bootstrap
from pagebridge.telemetry import metrics


class MyApp:
    def __init__(self):
        self.log = []

    def on_launch(self, options):
        self.log.append(("launch", options["path"]))

    def on_show(self):
        self.log.append("show")

    def on_error(self, message):
        self.log.append(("error", message))


class TestAppConfig:
    """配置构造"""

    def test_declared_app_events(self):
        runtime = bootstrap(adapters=[WechatAdapter()])
        config = create_app_config(runtime=runtime)

        for event in ("onLaunch", "onShow", "onHide", "onError", "onThemeChange"):
            assert callable(config[event])
        assert "onTitleClick" not in config

    def test_app_transform_applied(self):
        runtime = bootstrap(adapters=[ToutiaoAdapter()])
        assert create_app_config(runtime=runtime)["platform"] == "toutiao"

    def test_default_runtime(self, monkeypatch):
        monkeypatch.setenv("PAGEBRIDGE_TARGETS", "wechat")
        config = create_app_config()
        assert "onThemeChange" in config


class TestAppLifecycle:
    """应用生命周期"""

    def test_methods_subscribed(self):
        runtime = bootstrap(adapters=[WechatAdapter()])
        app = MyApp()
        config = create_app_config(app, runtime=runtime)

        config["onLaunch"]({"path": "pages/index/index", "scene": 1001})
        config["onShow"]({"path": "pages/index/index"})
        config["onError"]("boom")

        assert app.log == [("launch", "pages/index/index"), "show", ("error", "boom")]

    def test_launch_sets_global_app(self):
        runtime = bootstrap(adapters=[WechatAdapter()])
        config = create_app_config(runtime=runtime)

        with pytest.raises(AppNotReadyError):
            get_app()

        config["onLaunch"]({"path": "pages/index/index"})

        assert get_app() is config["app"]
        assert get_app().launched
        assert metrics.get_counter("app.launched") == 1

    def test_clear_global_app(self):
        runtime = bootstrap(adapters=[WechatAdapter()])
        create_app_config(runtime=runtime)["onLaunch"]({})
        clear_global_app()

        with pytest.raises(AppNotReadyError):
            get_app()

    def test_subscriber_failure_batched(self):
        runtime = bootstrap(adapters=[WechatAdapter()])
        config = create_app_config(runtime=runtime)
        app = config["app"]
        calls = []

        def broken():
            raise ValueError("boom")

        app.subscribe_hook("onHide", "a", broken)
        app.subscribe_hook("onHide", "b", lambda: calls.append("b"))

        with pytest.raises(DispatchError) as exc_info:
            config["onHide"]()

        assert calls == ["b"]
        assert exc_info.value.failures[0][0] == "a"

    def test_app_events_ignore_page_synonyms(self):
        """页面同义组不影响应用事件"""

        class ShowSynonymAdapter(WechatAdapter):
            @property
            def synonyms(self):
                return {"onShow": ["onShow", "events.onShow"]}

        runtime = bootstrap(adapters=[ShowSynonymAdapter()])
        config = create_app_config(runtime=runtime)
        app = config["app"]
        calls = []

        names = app.subscribe_hook("onShow", "a", lambda: calls.append("show"))
        config["onShow"]()

        assert names == ["onShow"]
        assert app.registry.events() == ["onShow"]
        assert calls == ["show"]

    def test_share_results_merged_on_toutiao(self):
        runtime = bootstrap(adapters=[ToutiaoAdapter()])
        # 头条 app_events 不含 onShareAppMessage，直接通过 registry 验证合并策略
        app = create_app_config(runtime=runtime)["app"]
        app.subscribe_hook("onShareAppMessage", "a", lambda: {"title": "a"})
        app.subscribe_hook("onShareAppMessage", "b", lambda: {"path": "/b"})

        assert app.handle_event("onShareAppMessage") == {"title": "a", "path": "/b"}
