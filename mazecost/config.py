"""Configuration management for the maze solver."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class SearchConfig:
    """Search and reporting settings."""

    # Keep equal-cost predecessors and report every tile on a best path
    track_tiles: bool = True
    # Draw the maze with the best tiles and route overlaid
    render: bool = False
    # Pop equal-cost frontier entries newest first (results must not change)
    reverse_ties: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class Config:
    """Main configuration container."""

    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _env_flag(name: str) -> Optional[bool]:
    value = os.environ.get(name)
    if not value:
        return None
    return value.strip().lower() not in _FALSE_VALUES


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. Defaults to config/default.yaml

    Returns:
        Populated Config dataclass
    """
    if config_path is None:
        # Look for config in standard locations
        candidates = [
            Path("config/default.yaml"),
            Path(__file__).parent.parent / "config" / "default.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                config_path = str(candidate)
                break

    config = Config()

    if config_path and Path(config_path).exists():
        with open(config_path) as f:
            data = yaml.safe_load(f)

        if data:
            if "search" in data:
                config.search = SearchConfig(**data["search"])
            if "logging" in data:
                config.logging = LoggingConfig(**data["logging"])
    elif config_path:
        logger.warning(f"Config file {config_path} not found, using defaults")

    # Environment variable overrides
    if os.environ.get("MAZECOST_LOG_LEVEL"):
        config.logging.level = os.environ["MAZECOST_LOG_LEVEL"]
    track_tiles = _env_flag("MAZECOST_TRACK_TILES")
    if track_tiles is not None:
        config.search.track_tiles = track_tiles
    render = _env_flag("MAZECOST_RENDER")
    if render is not None:
        config.search.render = render

    return config


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure logging based on configuration.

    Args:
        config: Logging configuration
    """
    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if config.file:
        # Ensure log directory exists
        log_path = Path(config.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.file))

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=handlers,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("markdown_it").setLevel(logging.WARNING)

    logger.debug(f"Logging configured at level {config.level}")
