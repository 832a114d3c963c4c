"""
Renderer - nested class groups to SCSS text.

Output for one class with a property and a sub-class:

    .component-button {
      padding: 16px;
      &.primary {
        background-color: #e63c19;
        color: #ffffff;
      }
    }
"""

from typing import Optional

from .config import RenderConfig
from .models import ClassBlock, NestedGroup, SubGroup


class Renderer:
    """Render NestedGroups with a fixed RenderConfig."""

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def render_block(self, block: ClassBlock) -> list[str]:
        """
        Render one class block.

        Args:
            block: ClassBlock to render

        Returns:
            Lines without trailing newlines
        """
        indent = self.config.indent
        lines = [f"{self.config.class_prefix}{block.name} {{"]

        for item, entry in block.entries.items():
            if isinstance(entry, SubGroup):
                lines.append(f"{indent}{self.config.sub_class_prefix}{item} {{")
                for subitem, value in entry.declarations.items():
                    lines.append(f"{indent * 2}{subitem}: {value};")
                lines.append(f"{indent}}}")
            else:
                lines.append(f"{indent}{item}: {entry.value};")

        lines.append("}")
        return lines

    def render(self, groups: NestedGroup) -> str:
        """Render every class block in group order."""
        blocks = [
            "".join(f"{line}\n" for line in self.render_block(block))
            for block in groups.values()
        ]
        return self.config.block_separator.join(blocks)


def render(groups: NestedGroup, config: Optional[RenderConfig] = None) -> str:
    """
    Render a NestedGroup to stylesheet text.

    Args:
        groups: Output of aggregate()
        config: Format settings (defaults reproduce the legacy button.scss)

    Returns:
        Stylesheet text, empty string for an empty group
    """
    return Renderer(config).render(groups)
