from dataclasses import dataclass, replace


@dataclass(frozen=True)
class GameConfig:
    # Board size in cells (odd sizes give a closed right/bottom edge)
    width: int = 51
    height: int = 51

    # pygame runner
    tile_px: int = 12
    fps: int = 60
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        for name in ("width", "height", "tile_px", "fps"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive")

    def with_overrides(self, **changes) -> "GameConfig":
        # None means "keep the current value" so argparse defaults pass through.
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


# Global defaults (can be swapped by launcher)
DEFAULT = GameConfig()
