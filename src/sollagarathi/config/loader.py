"""Read Sollagarathi settings from YAML."""

import os
from pathlib import Path

import yaml

from sollagarathi.config.models import SollagarathiConfig

CONFIG_PATH_ENV_VAR = "SOLLAGARATHI_CONFIG"


def load_config(path: Path | str) -> SollagarathiConfig:
    """Parse and validate a resolver config file.

    Missing sections fall back to the model defaults, so an empty file gives
    an in-memory lexicon with the stock sources and suggesters.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    text = Path(path).read_text(encoding="utf-8")
    return SollagarathiConfig.model_validate(yaml.safe_load(text) or {})


def get_default_config_path() -> Path:
    """Config used when none is given: $SOLLAGARATHI_CONFIG, else configs/default.yaml."""
    override = os.environ.get(CONFIG_PATH_ENV_VAR)
    if override:
        return Path(override)
    repo_root = Path(__file__).resolve().parents[3]
    return repo_root / "configs" / "default.yaml"
