"""Spring body state."""
from __future__ import annotations

from dataclasses import dataclass

MAX_SPEED = 500.0
FOLLOW_FACTOR = 0.3
REFERENCE_FPS = 60


@dataclass
class SpringBody:
    """Damped point mass pulled toward (target_x, target_y)."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    target_x: float = 0.0
    target_y: float = 0.0
    stiffness: float = 0.1
    damping: float = 0.9

    @classmethod
    def at_rest(
        cls, x: float, y: float, stiffness: float = 0.1, damping: float = 0.9
    ) -> SpringBody:
        """Body sitting still on its own target."""
        return cls(
            x=x, y=y, target_x=x, target_y=y, stiffness=stiffness, damping=damping
        )

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def velocity(self) -> tuple[float, float]:
        return (self.vx, self.vy)

    @property
    def target(self) -> tuple[float, float]:
        return (self.target_x, self.target_y)

    def aim(self, x: float, y: float) -> None:
        self.target_x = x
        self.target_y = y
