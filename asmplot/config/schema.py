"""
ASMplot v0.1.0

Configuration schema for ASMplot.

Defines all configuration parameters with defaults and validation. Command
line flags override these values; a user YAML file overrides the defaults.

Author: ASMplot Development Team
License: See README.md
"""

import copy
from numbers import Real
from pathlib import Path
from typing import Any, Dict, List

import yaml


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Plot geometry and axis scaling
    # ========================================================================
    'plot': {
        'width': 6.0,  # inches
        'height': 4.5,  # inches
        'x_relative': 2.1,  # max x as a multiple of the peak's x
        'y_relative': 1.1,  # max y as a multiple of the peak count
    },

    # ========================================================================
    # Execution
    # ========================================================================
    'execution': {
        'threads': 4,
        'scratch_dir': None,  # None = platform temp directory
        'scratch_prefix': '._ASM.',
        'timeout': None,  # seconds per external tool, None = wait forever
    },

    # ========================================================================
    # External tools (names on PATH or absolute paths)
    # ========================================================================
    'tools': {
        'fastk': 'FastK',
        'fastrm': 'Fastrm',
        'plotter': 'asm_plotter',
    },
}

DEFAULT_SECTIONS = tuple(DEFAULT_CONFIG)


def default_config() -> Dict[str, Any]:
    """Return a private copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def save_config_template(output_path: Path):
    """
    Save a configuration template to file.

    Args:
        output_path: Output file path
    """
    with open(output_path, 'w') as f:
        yaml.dump(default_config(), f, default_flow_style=False, sort_keys=False)


def _is_positive_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and value > 0


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _section(config: Dict[str, Any], name: str, errors: List[str]) -> Dict[str, Any]:
    section = config.get(name, {})
    if not isinstance(section, dict):
        errors.append(f"{name} must be a mapping (got {section!r})")
        return {}
    return section


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    plot = _section(config, 'plot', errors)
    for key in ('width', 'height', 'x_relative', 'y_relative'):
        if not _is_positive_number(plot.get(key)):
            errors.append(f"plot.{key} must be a number > 0 (got {plot.get(key)!r})")

    execution = _section(config, 'execution', errors)
    if not _is_positive_int(execution.get('threads')):
        errors.append(f"execution.threads must be a positive integer (got {execution.get('threads')!r})")

    timeout = execution.get('timeout')
    if timeout is not None and not _is_positive_number(timeout):
        errors.append(f"execution.timeout must be a number > 0 or null (got {timeout!r})")

    scratch_dir = execution.get('scratch_dir')
    if scratch_dir is not None and not isinstance(scratch_dir, str):
        errors.append(f"execution.scratch_dir must be a path (got {scratch_dir!r})")

    prefix = execution.get('scratch_prefix')
    if not isinstance(prefix, str) or not prefix or '/' in prefix:
        errors.append(f"execution.scratch_prefix must be a non-empty file name (got {prefix!r})")

    tools = _section(config, 'tools', errors)
    for tool in ('fastk', 'fastrm', 'plotter'):
        exe = tools.get(tool)
        if not isinstance(exe, str) or not exe.strip():
            errors.append(f"tools.{tool} must name an executable (got {exe!r})")

    return errors
