"""JSON helpers: compact rendering and class-bound parsing."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from objects_tasks.config import ObjectsTasksConfig
from objects_tasks.errors import SerializationError

__all__ = ["get_json", "from_json"]

logger = logging.getLogger("objects_tasks.serialization")

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__") and not isinstance(obj, type):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any, config: ObjectsTasksConfig | None = None) -> str:
    """Return the JSON representation of *obj*.

    Output is compact by default: ``[1, 2, 3]`` becomes ``[1,2,3]``.
    Dataclass instances are rendered as their field dictionary, other
    objects as their instance attributes.
    """
    cfg = config or ObjectsTasksConfig()
    separators = (",", ":") if cfg.json_indent is None else (",", ": ")
    try:
        return json.dumps(
            obj,
            default=_default,
            indent=cfg.json_indent,
            separators=separators,
            sort_keys=cfg.json_sort_keys,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc), cause=exc) from exc


def from_json(cls: type[T], text: str) -> T:
    """Parse *text* into an instance of *cls* without calling its constructor.

    Each key of the JSON object becomes an attribute of the instance, so
    methods defined on *cls* are available on the result::

        r = from_json(Rectangle, '{"width":10,"height":20}')
        r.get_area()  # 200
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}", cause=exc) from exc
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )

    instance = cls.__new__(cls)
    for key, value in data.items():
        # object.__setattr__ also works on frozen dataclasses.
        try:
            object.__setattr__(instance, key, value)
        except AttributeError as exc:
            raise SerializationError(
                f"Cannot set {key!r} on {cls.__name__}", cause=exc
            ) from exc
    logger.debug("loaded %s with keys %s", cls.__name__, sorted(data))
    return instance
