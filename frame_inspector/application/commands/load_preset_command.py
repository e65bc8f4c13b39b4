"""Load preset command."""
from dataclasses import dataclass

PRESET_RELOAD_DELAY_SECONDS = 0.1


@dataclass(frozen=True)
class LoadPresetCommand:
    """Command to point the frame at a named preset and reload it."""
    preset: str
    delay_seconds: float = PRESET_RELOAD_DELAY_SECONDS
