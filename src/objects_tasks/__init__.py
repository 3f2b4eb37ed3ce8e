"""objects_tasks: rectangle value object, JSON helpers and a CSS selector builder."""

__version__ = "0.1.0"

from objects_tasks.errors import (  # noqa: E402
    DuplicateError,
    ObjectsTasksError,
    OrderError,
    SelectorError,
    SerializationError,
)
from objects_tasks.config import ObjectsTasksConfig  # noqa: E402
from objects_tasks.shapes import Rectangle, make_rectangle  # noqa: E402
from objects_tasks.serialization import from_json, get_json  # noqa: E402
from objects_tasks.selector import (  # noqa: E402
    CombinedSelector,
    SelectorBuilder,
    css_selector_builder,
)

__all__ = [
    "__version__",
    "CombinedSelector",
    "DuplicateError",
    "ObjectsTasksConfig",
    "ObjectsTasksError",
    "OrderError",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "SerializationError",
    "css_selector_builder",
    "from_json",
    "get_json",
    "make_rectangle",
]
