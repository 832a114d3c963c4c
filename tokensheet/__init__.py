"""
tokensheet - Design tokens to nested component stylesheets.

Groups flat, CTI-tagged token records (category, type, item, subitem)
by component class and renders them as SCSS with ``&.`` sub-classes.

Usage:
    from tokensheet import aggregate, render

    records = [
        {"category": "component", "type": "button", "item": "padding", "value": "16px"},
        {"category": "component", "type": "button", "item": "primary",
         "subitem": "color", "value": "#ffffff"},
    ]
    groups = aggregate(records)
    text = render(groups)
"""

__version__ = "0.1.0"

from .exceptions import (
    TokensheetError,
    AggregationError,
    MalformedRecordError,
    StructuralConflictError,
    MalformedRecord,
    StructuralConflict,
    ConfigurationError,
    BuildError,
)
from .models import (
    TokenRecord,
    Scalar,
    SubGroup,
    Entry,
    ClassBlock,
    NestedGroup,
)
from .config import RenderConfig, BuildConfig
from .aggregator import Aggregator, aggregate
from .renderer import Renderer, render
from .build import (
    BuildTarget,
    BuildResult,
    build_stylesheet,
    write_stylesheet,
    build_all,
)

__all__ = [
    # Exceptions
    "TokensheetError",
    "AggregationError",
    "MalformedRecordError",
    "StructuralConflictError",
    "MalformedRecord",
    "StructuralConflict",
    "ConfigurationError",
    "BuildError",
    # Models
    "TokenRecord",
    "Scalar",
    "SubGroup",
    "Entry",
    "ClassBlock",
    "NestedGroup",
    # Config
    "RenderConfig",
    "BuildConfig",
    # Pipeline
    "Aggregator",
    "aggregate",
    "Renderer",
    "render",
    # Build
    "BuildTarget",
    "BuildResult",
    "build_stylesheet",
    "write_stylesheet",
    "build_all",
]
