"""Pydantic configuration schemas for graph generation runs."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

PRESETS_DIR = Path(__file__).parent / "presets"


class GenerationConfig(BaseModel):
    """Configuration of a generation run."""

    name: str = Field(default="default")
    description: str = Field(default="Default generation configuration")
    spec: str = Field(default="chain/10", description="Model specification, e.g. ba/100,3")
    directed: bool = Field(default=False)
    seed: int | None = Field(default=None, description="Random seed for reproducibility")
    num_samples: int = Field(default=1, ge=1, le=10000)

    # Output settings
    show_edges: bool = Field(default=False, description="Print edges of each sample")
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def load_config(config_path: str | Path) -> GenerationConfig:
    """Load configuration from a YAML file."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        config_dict = yaml.safe_load(f) or {}

    return GenerationConfig(**config_dict)


def load_preset(preset_name: str) -> GenerationConfig:
    """Load one of the bundled presets by name."""
    preset_path = PRESETS_DIR / f"{preset_name}.yaml"
    if not preset_path.exists():
        raise FileNotFoundError(f"Preset not found: {preset_name}")
    return load_config(preset_path)


def list_presets() -> list[str]:
    """Names of the bundled presets."""
    return sorted(path.stem for path in PRESETS_DIR.glob("*.yaml"))


def merge_overrides(config: GenerationConfig, **overrides) -> GenerationConfig:
    """Return a validated copy with every non-None override applied."""
    updates = {key: value for key, value in overrides.items() if value is not None}
    return GenerationConfig(**{**config.model_dump(), **updates})
