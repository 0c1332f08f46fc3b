"""Configuration package for the CAD converter."""

from .settings import ConverterSettings, get_settings

__all__ = ["ConverterSettings", "get_settings"]
