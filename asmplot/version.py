#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Version information.

Author: ASMplot Development Team
License: See README.md
"""

__version__ = "0.1.0"

# ASMplot v0.1.0
# Any usage is subject to this software's license.
