from enum import Enum


class Outcome(str, Enum):
    DRAGON = "dragon"
    TIGER = "tiger"
    TIE = "tie"

    @property
    def short(self) -> str:
        return self.value[0].upper()


class Mode(str, Enum):
    NORMAL = "Normal"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class InputMode(str, Enum):
    AUTOMATIC = "automatic"
    MANUAL = "manual"
