"""
Client configuration settings.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from shared.constants import (
    DEFAULT_FACE_COUNT, ANIMATION_ROLLS,
    ANIMATION_BASE_DELAY, ANIMATION_DELAY_FACTOR
)

load_dotenv()


@dataclass
class ClientSettings:
    """Client configuration."""
    
    # Dice
    face_count: int = DEFAULT_FACE_COUNT
    seed: Optional[int] = None
    
    # Roll animation
    animation_rolls: int = ANIMATION_ROLLS
    animation_base_delay: float = ANIMATION_BASE_DELAY
    animation_delay_factor: float = ANIMATION_DELAY_FACTOR
    
    # UI settings
    window_width: int = 720
    window_height: int = 520
    
    # Logging
    log_level: str = "INFO"


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


def load_settings() -> ClientSettings:
    """Load settings from environment variables."""
    return ClientSettings(
        face_count=int(os.getenv("DICE_FACE_COUNT", str(DEFAULT_FACE_COUNT))),
        seed=_optional_int(os.getenv("DICE_SEED")),
        animation_rolls=int(os.getenv("DICE_ANIMATION_ROLLS", str(ANIMATION_ROLLS))),
        animation_base_delay=float(os.getenv("DICE_ANIMATION_BASE_DELAY", str(ANIMATION_BASE_DELAY))),
        animation_delay_factor=float(os.getenv("DICE_ANIMATION_FACTOR", str(ANIMATION_DELAY_FACTOR))),
        window_width=int(os.getenv("DICE_WINDOW_WIDTH", "720")),
        window_height=int(os.getenv("DICE_WINDOW_HEIGHT", "520")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


settings = load_settings()
