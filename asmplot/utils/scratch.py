#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Per-run scratch name allocation.

The plotting engine writes its intermediate histograms and scripts under a
name prefix that must not collide with other runs sharing the same scratch
directory. A ScratchSession is allocated once at startup and handed to the
plotting engine, which owns whatever it creates under that prefix.
"""

import logging
import secrets
import string
from dataclasses import dataclass
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "._ASM."
_ALPHABET = string.ascii_letters + string.digits


@dataclass(frozen=True)
class ScratchSession:
    """Unique temporary-name root for one pipeline run."""
    root: Path

    @classmethod
    def allocate(cls, directory: Union[str, Path], prefix: str = DEFAULT_PREFIX,
                 width: int = 4, attempts: int = 100) -> "ScratchSession":
        """
        Pick a prefix under ``directory`` that no existing entry starts with.

        Args:
            directory: Scratch directory (must exist)
            prefix: Fixed leading part of the name
            width: Number of random characters appended to ``prefix``
            attempts: Candidates tried before giving up

        Raises:
            FileNotFoundError: If ``directory`` is not a directory
            FileExistsError: If every candidate is already in use
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise FileNotFoundError(f"Scratch directory not found: {directory}")

        for _ in range(attempts):
            name = prefix + "".join(secrets.choice(_ALPHABET) for _ in range(width))
            if not any(directory.glob(f"{name}*")):
                root = directory / name
                logger.debug(f"Scratch root: {root}")
                return cls(root=root)

        raise FileExistsError(
            f"Could not allocate a unique scratch name in {directory} after {attempts} attempts"
        )

    def __str__(self) -> str:
        return str(self.root)
