"""
Configuration Management
========================

Configuration for the XML definition loading pipeline.
"""

from beanxml_core.config.settings import (
    LoaderConfig,
    DetectorConfig,
    SchemaConfig,
    DocumentConfig,
    load_config,
    save_config,
    get_default_config,
)

__all__ = [
    "LoaderConfig",
    "DetectorConfig",
    "SchemaConfig",
    "DocumentConfig",
    "load_config",
    "save_config",
    "get_default_config",
]
