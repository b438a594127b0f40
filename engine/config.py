# engine/config.py

import logging
import os
import random
from dataclasses import dataclass, fields
from typing import Optional

import yaml

from .exceptions import InvalidConfiguration

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "config", "game_config.yaml"
)


@dataclass(frozen=True)
class GameSettings:
    """
    Constants fixed for the lifetime of a session.
    The reference game is an 8 x 10 board with 10 bombs.
    """
    rows: int = 8
    cols: int = 10
    bomb_count: int = 10
    seed: Optional[int] = None

    def validate(self) -> "GameSettings":
        for name in ("rows", "cols", "bomb_count"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidConfiguration(
                f"Board dimensions must be positive, got {self.rows}x{self.cols}"
            )
        if self.bomb_count < 0 or self.bomb_count >= self.rows * self.cols:
            raise InvalidConfiguration(
                f"Cannot place {self.bomb_count} bombs on a {self.rows}x{self.cols} board "
                f"while keeping one cell safe."
            )
        if self.seed is not None and (not isinstance(self.seed, int) or isinstance(self.seed, bool)):
            raise InvalidConfiguration(f"seed must be an integer or null, got {self.seed!r}")
        return self

    def random_source(self):
        """`random_int(max)` callable; reproducible when a seed is set."""
        return random.Random(self.seed).randrange

    @classmethod
    def from_dict(cls, data: dict) -> "GameSettings":
        known = {f.name for f in fields(cls)}
        ignored = set(data) - known
        if ignored:
            logger.warning("Ignoring unknown game settings: %s", ", ".join(sorted(ignored)))
        return cls(**{k: v for k, v in data.items() if k in known}).validate()


def load_settings(path: Optional[str] = None) -> GameSettings:
    """
    Load settings from the `game:` section of a YAML file.
    A missing file gives the defaults.
    """
    path = path or DEFAULT_CONFIG_PATH
    config = {}
    if os.path.exists(path):
        with open(path, "r") as f:
            config = yaml.safe_load(f) or {}
    else:
        logger.info("No config file at %s, using default game settings", path)

    if not isinstance(config, dict):
        raise InvalidConfiguration(f"{path} must hold a mapping at the top level")
    section = config.get("game", {}) or {}
    if not isinstance(section, dict):
        raise InvalidConfiguration(f"'game' section in {path} must be a mapping")
    return GameSettings.from_dict(section)
