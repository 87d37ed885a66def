from typing import Literal

from pydantic_settings import BaseSettings

QUADRATURE_ENGINE_ENV_PREFIX = "QUADRATURE_ENGINE_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EngineSettings(BaseSettings):
    model_config = {"env_prefix": QUADRATURE_ENGINE_ENV_PREFIX}

    root_tolerance: float = 1e-10
    max_iterations: int = 10000
    log_level: LogLevel = "WARNING"


def get_settings() -> EngineSettings:
    return EngineSettings()
