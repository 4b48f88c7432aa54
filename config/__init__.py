"""Configuration module for graph generation."""

from .schemas import (
    GenerationConfig,
    load_config,
    load_preset,
    list_presets,
    merge_overrides,
)

__all__ = [
    "GenerationConfig",
    "load_config",
    "load_preset",
    "list_presets",
    "merge_overrides",
]
