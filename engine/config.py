# engine/config.py
from dataclasses import dataclass, field
from typing import Optional
import os
import tomllib


@dataclass
class SearchConfig:
    depth: int = 3  # full turns (place + choose)
    seed: Optional[int] = None  # seeds the random fallback


@dataclass
class EvalConfig:
    one_in_line_weight: float = 0.5
    two_in_line_weight: float = 5.0
    three_in_line_weight: float = 50.0  # high reward for threats
    center_bonus: float = 2.0
    win_score: float = 10000.0
    giving_winning_piece_penalty: float = -9000.0


@dataclass
class UIConfig:
    engine_name: str = "Quarto Engine"
    api_port: int = 8000


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg


# single globally importable config instance, read by the interfaces only
CONFIG = Config.load_from_toml(os.environ.get("QUARTO_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("QUARTO_SEARCH_DEPTH")
if override_depth:
    try:
        CONFIG.search.depth = int(override_depth)
    except ValueError:
        pass
