"""
Configuration for stylesheet rendering and builds.
"""

from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import ConfigurationError


@dataclass
class RenderConfig:
    """Output format settings for the Renderer."""

    # Per-level indentation
    indent: str = "  "

    # Selector prefixes
    class_prefix: str = "."
    sub_class_prefix: str = "&."

    # Inserted between top-level blocks
    block_separator: str = "\n"

    def __post_init__(self):
        """Validate format settings."""
        if not isinstance(self.indent, str) or (self.indent and not self.indent.isspace()):
            raise ConfigurationError("indent", "must contain only whitespace")
        for name in ("class_prefix", "sub_class_prefix", "block_separator"):
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(name, "must be a string")


@dataclass
class BuildConfig:
    """Settings for writing stylesheets to disk."""

    build_path: Path = field(default_factory=lambda: Path("build"))

    # Reject items used both as property and sub-class
    strict: bool = False

    render: RenderConfig = field(default_factory=RenderConfig)

    def __post_init__(self):
        """Normalize build_path."""
        if isinstance(self.build_path, str):
            self.build_path = Path(self.build_path)

    def destination_path(self, destination: str) -> Path:
        """Resolve a destination file name under build_path."""
        return self.build_path / destination
