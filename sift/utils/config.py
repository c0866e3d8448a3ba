"""
Analysis configuration loading.

Thresholds for the analyzers live in sift/configs/analysis.yaml and are validated
against the AnalysisConfig schema below. A user YAML can override any subset of
them; unknown keys and wrongly-typed values are rejected so typos fail loudly
instead of being silently ignored.

Examples:
    >>> config = load_analysis_config()
    >>> config.job_fit.passing_score
    70

    >>> config = load_analysis_config(Path("my_overrides.yaml"))
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

load_dotenv()
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "configs" / "analysis.yaml"


@dataclass
class FormattingConfig:
    max_indent_levels: int = 2


@dataclass
class ClarityConfig:
    min_bullet_length: int = 5


@dataclass
class JobFitConfig:
    passing_score: int = 70


@dataclass
class PdfConfig:
    y_tolerance: float = 3.0
    word_gap: float = 5.0


@dataclass
class AnalysisConfig:
    """Typed schema for analysis thresholds."""

    formatting: FormattingConfig = field(default_factory=FormattingConfig)
    clarity: ClarityConfig = field(default_factory=ClarityConfig)
    job_fit: JobFitConfig = field(default_factory=JobFitConfig)
    pdf: PdfConfig = field(default_factory=PdfConfig)


class InvalidAnalysisConfigError(ValueError):
    """
    Raised when an analysis config file cannot be applied.

    Attributes:
        message: Error description
        config_path: Config file that failed to load or merge
        original_error: The underlying OmegaConf/YAML error, if any
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.original_error = original_error

        parts = [message]
        if config_path:
            parts.append(f"Config: {config_path}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


def _resolve_override_path(config_path: Optional[Path]) -> Optional[Path]:
    """Pick the explicit override path, else SIFT_CONFIG_PATH, else None."""
    if config_path is not None:
        return Path(config_path)

    env_path = os.getenv("SIFT_CONFIG_PATH")
    return Path(env_path) if env_path else None


def _merge_file(base: DictConfig, path: Path) -> DictConfig:
    """Merge one YAML file onto a structured config, wrapping every failure."""
    if not path.exists():
        raise InvalidAnalysisConfigError("Config file not found", config_path=path)

    try:
        return OmegaConf.merge(base, OmegaConf.load(path))
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise InvalidAnalysisConfigError(
            "Invalid analysis config", config_path=path, original_error=e
        ) from e


def load_analysis_config(config_path: Optional[Path] = None) -> DictConfig:
    """
    Load analysis thresholds, merging an optional override YAML onto the defaults.

    Args:
        config_path: Optional override YAML (defaults to SIFT_CONFIG_PATH env variable;
                     when neither is set, the packaged defaults are returned as-is)

    Returns:
        Read-only DictConfig with formatting, clarity, job_fit and pdf groups

    Raises:
        InvalidAnalysisConfigError: If the override file is missing, unparseable,
            introduces unknown keys, or has values of the wrong type
    """
    config = _merge_file(OmegaConf.structured(AnalysisConfig), DEFAULT_CONFIG_PATH)

    override_path = _resolve_override_path(config_path)
    if override_path is not None:
        config = _merge_file(config, override_path)

    OmegaConf.set_readonly(config, True)
    return config
