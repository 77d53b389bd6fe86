"""Configuration adapters."""

from journey_planner.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
