"""Configuration utilities for LeniaKit."""
from .schema import ConfigSchema, load_config, build_board, build_rule

__all__ = ["ConfigSchema", "load_config", "build_board", "build_rule"]
