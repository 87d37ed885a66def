"""
Configuration dataclasses for quadrature generation.

This module defines the configuration parameters for:
- Root finding (Newton-Raphson tolerance and iteration bound)
- Overall generation settings

Defaults come from the environment (see EngineSettings) and can be
overridden from a YAML file with load_config.
"""

from dataclasses import dataclass, field
from pathlib import Path

from omegaconf import OmegaConf

from quadrature_engine.core.settings import get_settings
from quadrature_engine.rootfinding.newton import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    NewtonRaphsonSingleRootFinder,
)


@dataclass
class RootFinderConfig:
    """
    Configuration for the Newton-Raphson root finder.

    Attributes:
        tolerance: Absolute tolerance on polynomial value and step size.
        max_iterations: Newton steps allowed per root before failing.
    """

    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be > 0, got {self.tolerance}")
        if self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be >= 1, got {self.max_iterations}"
            )

    def build(self) -> NewtonRaphsonSingleRootFinder:
        """Create a root finder with these settings."""
        return NewtonRaphsonSingleRootFinder(
            tolerance=self.tolerance, max_iterations=self.max_iterations
        )


@dataclass
class QuadratureConfig:
    """
    Master configuration for quadrature generation.

    Attributes:
        root_finder: Settings for the Newton-Raphson root finder.
    """

    root_finder: RootFinderConfig = field(default_factory=RootFinderConfig)


def default_config() -> QuadratureConfig:
    """Create the default configuration from environment settings."""
    settings = get_settings()
    return QuadratureConfig(
        root_finder=RootFinderConfig(
            tolerance=settings.root_tolerance,
            max_iterations=settings.max_iterations,
        )
    )


def load_config(yaml_path: Path) -> QuadratureConfig:
    """Load and validate a configuration from YAML.

    Keys missing from the file keep their defaults.

    Args:
        yaml_path: Path to YAML config file

    Returns:
        Validated QuadratureConfig

    Raises:
        FileNotFoundError: If yaml_path doesn't exist
        ValueError: If a value is out of range
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    schema = OmegaConf.structured(default_config())
    user_config = OmegaConf.load(yaml_path)
    config = OmegaConf.merge(schema, user_config)

    # Convert to typed dataclass
    result = OmegaConf.to_object(config)
    assert isinstance(result, QuadratureConfig)

    return result
