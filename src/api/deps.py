from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.rules_port import RulesOGAdapter
from src.rules.loader import load_rules, resolve_rules_path
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.rules_path: Path = resolve_rules_path()


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_cached_rules(path: Path) -> Rules:
    return load_rules(path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    # A missing rules file falls back to the built-in defaults
    if not settings.rules_path.exists():
        return Rules()
    return _load_cached_rules(settings.rules_path)


def get_og_rules(rules: Rules = Depends(get_rules)) -> RulesOGAdapter:
    return RulesOGAdapter(rules)
