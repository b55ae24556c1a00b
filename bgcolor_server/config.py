import os
from typing import Mapping, Optional

DEFAULT_BG_COLOR = "white"


class Settings:
    """
    Environment-configured settings served to the page.
    An unset or empty BG_COLOR falls back to DEFAULT_BG_COLOR.
    """

    def __init__(self, bg_color: Optional[str] = None):
        self.bg_color = bg_color or DEFAULT_BG_COLOR

    def to_dict(self):
        return {"bgColor": self.bg_color}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Reads settings from the given mapping (os.environ by default)."""
    if environ is None:
        environ = os.environ
    return Settings(bg_color=environ.get("BG_COLOR"))
