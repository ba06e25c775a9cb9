"""Configuration loading for Healthgrade."""

from .loader import load_config, parse_severity_name
from .model import HealthgradeConfig

__all__ = ["HealthgradeConfig", "load_config", "parse_severity_name"]
