"""
Configuration Settings
======================

Configuration dataclasses for the XML definition loading pipeline.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import List
import json
import logging

try:
    import yaml
    YAML_AVAILABLE = True
except ImportError:
    YAML_AVAILABLE = False

logger = logging.getLogger(__name__)


@dataclass
class DetectorConfig:
    """Validation mode detection configuration."""

    encoding: str = "utf-8"


@dataclass
class SchemaConfig:
    """Schema resolution configuration."""

    mappings_location: str = "META-INF/beanxml.schemas"
    search_paths: List[str] = field(default_factory=list)  # Empty means current directory


@dataclass
class DocumentConfig:
    """Document loading configuration."""

    validation_mode: str = "auto"  # none, auto, dtd, xsd
    namespace_aware: bool = False
    no_network: bool = True


@dataclass
class LoaderConfig:
    """
    Complete loader configuration.

    Example:
        config = LoaderConfig()
        config.document.validation_mode = "xsd"
        config.schema.search_paths = ["resources"]
        save_config(config, Path("beanxml.yaml"))
    """

    detector: DetectorConfig = field(default_factory=DetectorConfig)
    schema: SchemaConfig = field(default_factory=SchemaConfig)
    document: DocumentConfig = field(default_factory=DocumentConfig)

    log_level: str = "INFO"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'detector': asdict(self.detector),
            'schema': asdict(self.schema),
            'document': asdict(self.document),
            'log_level': self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'LoaderConfig':
        """Create from dictionary."""
        config = cls()

        if 'detector' in data:
            config.detector = DetectorConfig(**data['detector'])
        if 'schema' in data:
            config.schema = SchemaConfig(**data['schema'])
        if 'document' in data:
            config.document = DocumentConfig(**data['document'])

        if 'log_level' in data:
            config.log_level = data['log_level']

        return config


def load_config(config_path: Path) -> LoaderConfig:
    """
    Load configuration from file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config_path: Path to config file

    Returns:
        LoaderConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, 'r', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            if not YAML_AVAILABLE:
                raise ImportError("PyYAML is required for YAML config files")
            data = yaml.safe_load(f) or {}
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    logger.info(f"Loaded configuration from {config_path}")
    return LoaderConfig.from_dict(data)


def save_config(config: LoaderConfig, config_path: Path) -> None:
    """
    Save configuration to file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config: LoaderConfig to save
        config_path: Path to save config file

    Raises:
        ValueError: If file format is not supported
    """
    suffix = config_path.suffix.lower()
    data = config.to_dict()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            if not YAML_AVAILABLE:
                raise ImportError("PyYAML is required for YAML config files")
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
        elif suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    logger.info(f"Saved configuration to {config_path}")


def get_default_config() -> LoaderConfig:
    """Get default configuration."""
    return LoaderConfig()
