# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the rich theme used by the Clade console.

`OneColors` holds hex styles usable directly in rich markup
(e.g. `f"[{OneColors.DARK_RED}]error[/]"`); `get_theme()` exposes the same palette
as named styles for `rich.console.Console(theme=...)`.
"""
from rich.theme import Theme


class OneColors:
    """One Dark inspired palette."""

    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    GREEN = "#98C379"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"

    WHITE_b = f"bold {WHITE}"
    LIGHT_RED_b = f"bold {LIGHT_RED}"
    GREEN_b = f"bold {GREEN}"
    BLUE_b = f"bold {BLUE}"
    CYAN_b = f"bold {CYAN}"
    MAGENTA_b = f"bold {MAGENTA}"


def get_theme() -> Theme:
    """Return the named styles used by help and error rendering."""
    return Theme(
        {
            "clade.banner": OneColors.MAGENTA_b,
            "clade.heading": "bold",
            "clade.option": OneColors.CYAN,
            "clade.command": OneColors.BLUE_b,
            "clade.meta": OneColors.LIGHT_YELLOW,
            "clade.required": OneColors.LIGHT_RED,
            "clade.error": OneColors.DARK_RED,
            "clade.version": OneColors.GREEN_b,
            "clade.dim": OneColors.COMMENT_GREY,
        }
    )
