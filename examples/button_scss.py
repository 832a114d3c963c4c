"""
Button Stylesheet Example - Build button.scss from resolved tokens.

Run with: python examples/button_scss.py
Writes build/button.scss and prints it.
"""

import logging

from tokensheet import BuildConfig, BuildTarget, TokenRecord, build_all


# Already resolved: colors in hex, sizes in px
BUTTON_TOKENS = [
    TokenRecord("component", "button", "padding", "16px"),
    TokenRecord("component", "button", "font-size", "16px"),
    TokenRecord("component", "button", "text-align", "center"),
    TokenRecord("component", "button", "primary", "#e63c19", subitem="background-color"),
    TokenRecord("component", "button", "primary", "#ffffff", subitem="color"),
    TokenRecord("component", "button", "secondary", "#fad8d1", subitem="background-color"),
    TokenRecord("component", "button", "secondary", "#0000ff", subitem="color"),
]


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    result = build_all(
        [BuildTarget("button.scss", BUTTON_TOKENS)],
        BuildConfig(build_path="build/"),
    )

    for path in result.written:
        print("=" * 60)
        print(path)
        print("=" * 60)
        print(path.read_text(encoding="utf-8"))

    for destination, error in result.failures.items():
        print(f"FAILED {destination}: {error}")
