from dataclasses import dataclass

from strimg.geometry import FIT_MODES, POSITIONS_X, POSITIONS_Y


@dataclass
class StrimgConfig:
    width: int = 0
    height: int = 0
    mode: str = "contain"
    position_x: str = "center"
    position_y: str = "center"

    @property
    def has_size(self) -> bool:
        return self.width > 0 and self.height > 0

    def validate(self) -> None:
        if self.mode not in FIT_MODES:
            raise ValueError(f"Unknown fit mode: {self.mode!r} (expected one of {', '.join(FIT_MODES)})")
        if self.position_x not in POSITIONS_X:
            raise ValueError(f"Unknown horizontal position: {self.position_x!r}")
        if self.position_y not in POSITIONS_Y:
            raise ValueError(f"Unknown vertical position: {self.position_y!r}")
