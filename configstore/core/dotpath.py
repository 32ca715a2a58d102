"""Dot-path addressing into JSON-compatible documents.

A path is either a string of `.`-separated segments (``"a.0.b"``) or a
sequence of string/int segments (``["a", 0, "b"]``). The sequence form is the
only way to reach a key that itself contains a dot. Each segment addresses a
mapping key, or a list index when the segment is a non-negative integer (or
an all-digit string) and the node is a list.

Reads never raise for missing locations; writes create missing containers on
the way down.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
import copy
import json
from typing import Any

from configstore.core.errors import InvalidPathError

Segment = str | int
KeyPath = str | int | Sequence[Segment]

_MISSING = object()


def _json_key(key: Any) -> Any:
    # Same key text json.dumps writes for scalar keys
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    return key


def to_json_tree(value: Any) -> Any:
    """Return a copy of `value` in the shape it has after a JSON round trip.

    Mappings become dicts with string keys and tuples become lists. Other
    leaves are deep-copied unchanged.
    """
    if isinstance(value, Mapping):
        return {_json_key(k): to_json_tree(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_tree(v) for v in value]
    return copy.deepcopy(value)


def to_segments(path: KeyPath) -> list[Segment]:
    """Split `path` into its segments.

    Raises:
        TypeError: If `path` is not a string, an int, or a list/tuple of them.
    """
    if isinstance(path, str):
        return path.split(".")
    if isinstance(path, int) and not isinstance(path, bool):
        return [path]
    if isinstance(path, (list, tuple)):
        segments: list[Segment] = []
        for seg in path:
            if isinstance(seg, bool) or not isinstance(seg, (str, int)):
                raise TypeError(f"path segments must be str or int, not {type(seg).__name__}")
            segments.append(seg)
        return segments
    raise TypeError(f"path must be a str, int or sequence of segments, not {type(path).__name__}")


def _as_index(segment: Segment) -> int | None:
    """Return `segment` as a list index, or None if it is not one."""
    if isinstance(segment, int):
        return segment if segment >= 0 else None
    if segment.isascii() and segment.isdigit():
        return int(segment)
    return None


def _as_key(segment: Segment) -> str:
    return segment if isinstance(segment, str) else str(segment)


def _child(node: Any, segment: Segment) -> Any:
    if isinstance(node, Mapping):
        key = _as_key(segment)
        return node[key] if key in node else _MISSING
    if isinstance(node, list):
        idx = _as_index(segment)
        if idx is not None and idx < len(node):
            return node[idx]
    return _MISSING


def _lookup(document: Any, segments: list[Segment]) -> Any:
    node = document
    for seg in segments:
        node = _child(node, seg)
        if node is _MISSING:
            break
    return node


def get_in(document: Any, path: KeyPath | None, default: Any = None) -> Any:
    """Return the value at `path`, or `default` when it does not resolve."""
    if path is None:
        return default
    value = _lookup(document, to_segments(path))
    return default if value is _MISSING else value


def has_in(document: Any, path: KeyPath | None) -> bool:
    """Return True if `path` resolves, even when the value there is None."""
    if path is None:
        return False
    return _lookup(document, to_segments(path)) is not _MISSING


def _assign(node: Any, segment: Segment, value: Any) -> None:
    if isinstance(node, MutableMapping):
        node[_as_key(segment)] = value
        return
    if isinstance(node, list):
        idx = _as_index(segment)
        if idx is None:
            raise InvalidPathError(f"cannot use {segment!r} as a list index")
        if idx >= len(node):
            node.extend([None] * (idx - len(node) + 1))
        node[idx] = value
        return
    raise InvalidPathError(f"cannot assign {segment!r} into a {type(node).__name__}")


def set_in(document: Any, path: KeyPath, value: Any) -> None:
    """Place `value` at `path`, creating intermediate containers as needed.

    A missing or scalar intermediate is replaced by a list when the following
    segment is numeric and by a dict otherwise. Lists are padded with None up
    to the addressed index.

    Raises:
        InvalidPathError: If the path is empty or a non-numeric segment meets
            an existing list.
    """
    segments = to_segments(path)
    if not segments:
        raise InvalidPathError("cannot set an empty path")

    node = document
    for seg, nxt in zip(segments, segments[1:]):
        child = _child(node, seg)
        if child is _MISSING or not isinstance(child, (Mapping, list)):
            child = [] if _as_index(nxt) is not None else {}
            _assign(node, seg, child)
        node = child
    _assign(node, segments[-1], value)


def unset_in(document: Any, path: KeyPath | None) -> bool:
    """Remove the value at `path`; return True if something was removed.

    Removing a list element shifts the following elements down.
    """
    if path is None:
        return False
    segments = to_segments(path)
    if not segments:
        return False
    parent = _lookup(document, segments[:-1])
    last = segments[-1]
    if isinstance(parent, MutableMapping):
        key = _as_key(last)
        if key in parent:
            del parent[key]
            return True
    elif isinstance(parent, list):
        idx = _as_index(last)
        if idx is not None and idx < len(parent):
            del parent[idx]
            return True
    return False
