"""closure_demo — private state behind factory-made closures."""

__all__ = [
    "__version__",
    "Record",
    "Registry",
    "create_counter",
    "create_registry",
    "manage_animals",
]
__version__ = "0.1.0"

from closure_demo.counter import create_counter  # noqa: E402
from closure_demo.model import Record  # noqa: E402
from closure_demo.registry import Registry, create_registry, manage_animals  # noqa: E402
