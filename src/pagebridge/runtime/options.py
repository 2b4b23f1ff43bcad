"""RuntimeOptions - 由启用的平台适配器汇总出的运行时选项

包含：
- app_events: 应用事件（各平台并集，保持声明顺序）
- default_page_events: 未单独声明的页面使用的透传事件
- page_events: 按页面路径声明的透传事件（构建阶段只声明页面用到的事件）
- synonyms: 逻辑事件 → 宿主事件名
- result_policy / result_policies: dispatch 结果合并策略
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from ..config import BUILTIN_PAGE_EVENTS, DEFAULT_APP_EVENTS, DEFAULT_PAGE_EVENTS, DEFAULT_RESULT_POLICY
from ..core.ids import normalize_path
from ..events.names import SynonymGroups, resolve_alias
from ..events.policies import ResultPolicy, get_policy

if TYPE_CHECKING:
    from ..adapters.base import PlatformAdapter

PolicyName = Literal["first", "last", "merge"]


def _ordered_union(groups: Iterable[Iterable[str]]) -> list[str]:
    merged: list[str] = []
    for names in groups:
        for name in names:
            if name not in merged:
                merged.append(name)
    return merged


def _check_names(names: list[str]) -> list[str]:
    for name in names:
        if not name or not name.strip():
            raise ValueError("event names must be non-empty")
    return names


class RuntimeOptions(BaseModel):
    """运行时选项（启动后只读）"""

    app_events: list[str] = Field(default_factory=lambda: list(DEFAULT_APP_EVENTS))
    default_page_events: list[str] = Field(default_factory=lambda: list(DEFAULT_PAGE_EVENTS))
    page_events: dict[str, list[str]] = Field(default_factory=dict)
    synonyms: dict[str, list[str]] = Field(default_factory=dict)
    result_policy: PolicyName = DEFAULT_RESULT_POLICY
    result_policies: dict[str, PolicyName] = Field(default_factory=dict)

    _groups: SynonymGroups = PrivateAttr(default_factory=SynonymGroups)

    model_config = {"frozen": True}

    @field_validator("app_events", "default_page_events")
    @classmethod
    def _validate_event_list(cls, value: list[str]) -> list[str]:
        return _check_names(value)

    @field_validator("page_events")
    @classmethod
    def _validate_page_events(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        normalized: dict[str, list[str]] = {}
        for path, events in value.items():
            if not normalize_path(path):
                raise ValueError("page paths must be non-empty")
            normalized[normalize_path(path)] = _check_names(events)
        return normalized

    @field_validator("synonyms")
    @classmethod
    def _validate_synonyms(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        for logical, names in value.items():
            if not names:
                raise ValueError(f"synonym group for {logical} must not be empty")
            _check_names(names)
        return value

    def model_post_init(self, context: Any) -> None:
        self._groups = SynonymGroups(self.synonyms)

    # === 构造 ===

    @classmethod
    def from_adapters(
        cls,
        adapters: list["PlatformAdapter"],
        page_events: dict[str, list[str]] | None = None,
        result_policy: PolicyName | None = None,
    ) -> "RuntimeOptions":
        """按适配器注册顺序汇总选项"""
        synonyms = SynonymGroups()
        policies: dict[str, str] = {}
        for adapter in adapters:
            synonyms.merge(adapter.synonyms)
            for event, policy in adapter.result_policies.items():
                policies.setdefault(resolve_alias(event), policy)
        return cls(
            app_events=_ordered_union(adapter.app_events for adapter in adapters) or list(DEFAULT_APP_EVENTS),
            default_page_events=_ordered_union(adapter.page_events for adapter in adapters)
            or list(DEFAULT_PAGE_EVENTS),
            page_events=page_events or {},
            synonyms=synonyms.to_dict(),
            result_policy=result_policy or DEFAULT_RESULT_POLICY,
            result_policies=policies,
        )

    # === 查询 ===

    def events_for_page(self, page_path: str) -> list[str]:
        """页面配置需要暴露的事件（内置事件在前）"""
        declared = self.page_events.get(normalize_path(page_path), self.default_page_events)
        return _ordered_union([BUILTIN_PAGE_EVENTS, [resolve_alias(event) for event in declared]])

    def expand(self, event_name: str) -> list[str]:
        """逻辑事件 → 宿主事件名列表"""
        return self._groups.expand(event_name)

    def policy_for(self, event_name: str) -> ResultPolicy:
        name = self.result_policies.get(resolve_alias(event_name), self.result_policy)
        return get_policy(name)
