"""
Merge Utilities
Small functional helpers used to combine GraphQL modules
"""

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence


def arrify(value: Any) -> List[Any]:
    """
    Wrap a bare value in a list

    Args:
        value: A list/tuple of items, or a single item

    Returns:
        A new list; lists and tuples are copied, anything else is wrapped
    """
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def get_field(item: Any, key: str) -> Any:
    """Read ``key`` from a mapping, or the attribute of the same name"""
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def pluck(key: str, items: Iterable[Any]) -> List[Any]:
    """Project ``key`` out of every item, absent keys give None"""
    return [get_field(item, key) for item in items]


def reject_none(values: Iterable[Any]) -> List[Any]:
    return [value for value in values if value is not None]


def deep_merge_right(left: Any, right: Any) -> Any:
    """
    Recursively merge two mappings, the right one taking precedence

    Keys present in only one side are copied over. When both sides hold a
    mapping for the same key the two are merged recursively; for any other
    pair the right value replaces the left one outright. Functions and other
    non-mapping values are never traversed. The same rule applies at the
    top level: a non-mapping ``right`` is returned as-is, and a non-mapping
    ``left`` is dropped.

    Neither argument is mutated: every merged level is a fresh dict.

    Args:
        left: Lower precedence mapping
        right: Higher precedence mapping

    Returns:
        The merged dict, or ``right`` when it is not a mapping
    """
    if not isinstance(right, Mapping):
        return right
    if not isinstance(left, Mapping):
        return _copy_tree(right)

    merged = {key: _copy_tree(value) for key, value in left.items()}

    for key, value in right.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge_right(current, value)
        else:
            merged[key] = _copy_tree(value)

    return merged


def _copy_tree(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _copy_tree(child) for key, child in value.items()}
    return value


def merge_all(mappings: Iterable[Optional[Mapping[str, Any]]]) -> Dict[str, Any]:
    """
    Shallow merge mappings left to right

    Later mappings win on duplicate keys. Nested values are taken as-is,
    and None entries are skipped.
    """
    merged: Dict[str, Any] = {}
    for mapping in mappings:
        if mapping is not None:
            merged.update(mapping)
    return merged


def juxt(functions: Sequence[Callable[..., Any]]) -> Callable[..., List[Any]]:
    """
    Build a function applying every function to the same arguments

    Returns:
        A callable returning the list of results, in ``functions`` order
    """
    functions = tuple(functions)

    def apply_all(*args, **kwargs) -> List[Any]:
        return [function(*args, **kwargs) for function in functions]

    return apply_all
