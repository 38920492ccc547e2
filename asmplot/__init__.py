#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Package initialization and version metadata.

Author: ASMplot Development Team
License: See README.md
"""

from .version import __version__

__all__ = ["__version__"]

# ASMplot v0.1.0
# Any usage is subject to this software's license.
