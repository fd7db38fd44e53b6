"""Named spinner frame sets."""

import logging
from typing import Dict, List

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "classic"

SPINNER_STYLES: Dict[str, str] = {
    "classic": "|/-\\",
    "dots": "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏",
    "arrows": "←↖↑↗→↘↓↙",
    "blocks": "▖▘▝▗",
    "pulse": "▁▂▃▄▅▆▇█▇▆▅▄▃▂",
    "bouncing": "⠁⠂⠄⡀⢀⠠⠐⠈",
    "circle": "◐◓◑◒",
    "square": "◰◳◲◱",
    "triangle": "◴◵◶◷",
    "diamond": "◇◈◆",
}


def resolve_style(name: str) -> str:
    """Return the first style whose name starts with ``name``, else classic."""
    if name:
        for style in SPINNER_STYLES:
            if style.startswith(name):
                return style
    logger.warning(f"Unknown spinner style {name!r}, using {DEFAULT_STYLE}")
    return DEFAULT_STYLE


def get_spinner_frames(name: str = DEFAULT_STYLE) -> List[str]:
    """One frame per character of the named style."""
    return list(SPINNER_STYLES[resolve_style(name)])
