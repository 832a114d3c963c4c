"""
Pytest fixtures for tokensheet tests.
"""

import pytest
from pathlib import Path

from tokensheet.config import BuildConfig
from tokensheet.models import TokenRecord


@pytest.fixture
def button_records():
    """Resolved records for the button component, in source order."""
    return [
        TokenRecord("component", "button", "padding", "16px"),
        TokenRecord("component", "button", "font-size", "16px"),
        TokenRecord("component", "button", "text-align", "center"),
        TokenRecord("component", "button", "primary", "#e63c19", subitem="background-color"),
        TokenRecord("component", "button", "primary", "#ffffff", subitem="color"),
        TokenRecord("component", "button", "secondary", "#fad8d1", subitem="background-color"),
        TokenRecord("component", "button", "secondary", "#0000ff", subitem="color"),
    ]


@pytest.fixture
def button_scss():
    """Expected stylesheet for button_records."""
    return (
        ".component-button {\n"
        "  padding: 16px;\n"
        "  font-size: 16px;\n"
        "  text-align: center;\n"
        "  &.primary {\n"
        "    background-color: #e63c19;\n"
        "    color: #ffffff;\n"
        "  }\n"
        "  &.secondary {\n"
        "    background-color: #fad8d1;\n"
        "    color: #0000ff;\n"
        "  }\n"
        "}\n"
    )


@pytest.fixture
def mixed_records():
    """Records spanning two class keys, interleaved."""
    return [
        {"category": "component", "type": "button", "item": "padding", "value": "16px"},
        {"category": "component", "type": "input", "item": "border", "value": "1px"},
        {"category": "component", "type": "button", "item": "primary",
         "subitem": "color", "value": "#ffffff"},
        {"category": "component", "type": "input", "item": "focus",
         "subitem": "outline", "value": "2px"},
    ]


@pytest.fixture
def build_config(tmp_path: Path) -> BuildConfig:
    """Build configuration writing under a temporary directory."""
    return BuildConfig(build_path=tmp_path / "build")
