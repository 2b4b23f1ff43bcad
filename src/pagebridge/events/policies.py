"""Dispatch 结果合并策略

Registry 只负责按顺序收集返回值，合并由调用方（Page/App builder）决定：
- first: 第一个非 None 结果（默认；空 dict 也是有效结果）
- last: 最后一个非 None 结果
- merge: dict 结果按顺序浅合并；出现非 dict 结果时退化为 first
"""

from collections.abc import Callable
from typing import Any

ResultPolicy = Callable[[list[Any]], Any]


def first_result(results: list[Any]) -> Any:
    for result in results:
        if result is not None:
            return result
    return None


def last_result(results: list[Any]) -> Any:
    for result in reversed(results):
        if result is not None:
            return result
    return None


def merge_results(results: list[Any]) -> Any:
    values = [result for result in results if result is not None]
    if not values:
        return None
    if not all(isinstance(value, dict) for value in values):
        return values[0]
    merged: dict = {}
    for value in values:
        merged.update(value)
    return merged


POLICIES: dict[str, ResultPolicy] = {
    "first": first_result,
    "last": last_result,
    "merge": merge_results,
}


def get_policy(name: str) -> ResultPolicy:
    """按名字获取合并策略

    Raises:
        ValueError: 未知策略名
    """
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown result policy: {name}") from None
