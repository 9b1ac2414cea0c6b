"""Configuration schema."""

from .engine_config import EngineConfig, load_engine_config

__all__ = ["EngineConfig", "load_engine_config"]
