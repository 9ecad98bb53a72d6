"""Display preference models."""
from enum import Enum


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_dark_mode(cls, dark_mode: bool) -> "Theme":
        return cls.DARK if dark_mode else cls.LIGHT
