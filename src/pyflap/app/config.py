from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pyflap.domain.config import GameConfig


@dataclass(frozen=True)
class AppConfig:
    width: int = 480
    height: int = 640
    fps: int = 60
    restart_delay_ms: int = 250   # keeps a late key press from restarting straight away
    data_dir: Path = field(default_factory=Path.cwd)
    game: GameConfig = field(default_factory=GameConfig)

    @property
    def high_score_path(self) -> Path:
        return self.data_dir / "high_score.json"
