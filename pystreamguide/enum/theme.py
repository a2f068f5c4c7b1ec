import enum


class Theme(enum.Enum):
    DARK = "dark"
    LIGHT = "light"

    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK
