import copy
import json
from typing import Any, Dict, List

# Tailwind's stock `fontFamily.sans` stack
DEFAULT_SANS_FONTS: List[str] = [
    "ui-sans-serif",
    "system-ui",
    "sans-serif",
    '"Apple Color Emoji"',
    '"Segoe UI Emoji"',
    '"Segoe UI Symbol"',
    '"Noto Color Emoji"',
]

theme_config: Dict[str, Any] = {
    "darkMode": "class",
    "content": [
        "./pages/**/*.{js,ts,jsx,tsx}",
        "./components/**/*.{js,ts,jsx,tsx}",
        "./app/templates/**/*.html",
    ],
    "theme": {
        "extend": {
            "colors": {
                "material-light": "rgb(246, 248, 250)",
                "material-dark": "rgb(0, 0, 0)",
                "accent": "rgb(0, 124, 255)",
            },
            "fontFamily": {
                "sans": ["Mona Sans", *DEFAULT_SANS_FONTS],
            },
        },
    },
    "plugins": ["@tailwindcss/typography"],
}


def get_theme_config() -> Dict[str, Any]:
    # Callers get their own copy; the module-level mapping stays fixed
    return copy.deepcopy(theme_config)


def render_tailwind_config(config: Dict[str, Any] | None = None) -> str:
    """
    Render the theme as a CommonJS `tailwind.config.js` module.
    Plugin entries are package names and become `require(...)` calls.
    """
    config = theme_config if config is None else config
    body = {key: value for key, value in config.items() if key != "plugins"}

    lines = [
        "// Generated by scripts/export_theme.py from app/theme.py",
        "module.exports = {",
    ]
    for key, value in body.items():
        rendered = json.dumps(value, indent=2).replace("\n", "\n  ")
        lines.append(f"  {key}: {rendered},")
    plugins = ", ".join(f"require({json.dumps(p)})" for p in config.get("plugins", []))
    lines.append(f"  plugins: [{plugins}],")
    lines.append("};")
    return "\n".join(lines) + "\n"
