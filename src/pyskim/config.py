"""Configuration for the pyskim command line output."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".pyskim"


@dataclass
class ScanConfig:
    """Display options applied by the CLI on top of the scan results.

    The scanners themselves are not configurable: they always report the
    implicit ``self`` parameter and every descriptor kind.

    Attributes:
        hide_self: Drop a leading ``self`` from constructor arguments.
        include_functions: Show top-level functions.
        include_classes: Show top-level classes.
        include_globals: Show top-level global variables.
    """
    hide_self: bool = False
    include_functions: bool = True
    include_classes: bool = True
    include_globals: bool = True


def load_scan_config(root: Path | None = None) -> ScanConfig:
    """Load scan configuration from .pyskim file in the given directory.

    Args:
        root: Directory containing the config file. If None, uses current directory.

    Returns:
        ScanConfig object with loaded or default values.

    Notes:
        If .pyskim file doesn't exist or can't be parsed, returns default config.
        Keys with non-boolean values are ignored. Expected YAML structure:

        ```yaml
        scan:
          hide_self: true
          include_globals: false
        ```
    """
    if root is None:
        root = Path.cwd()

    config_path = root / CONFIG_FILE_NAME

    if not config_path.exists():
        return ScanConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        logger.warning(f"Ignoring unreadable config file {config_path}: {e}")
        return ScanConfig()

    if not isinstance(data, dict):
        return ScanConfig()

    scan_config = data.get("scan", {})
    if not isinstance(scan_config, dict):
        return ScanConfig()

    values = {
        f.name: scan_config[f.name]
        for f in fields(ScanConfig)
        if isinstance(scan_config.get(f.name), bool)
    }
    return ScanConfig(**values)
