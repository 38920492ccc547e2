#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Blocking execution of external tools (FastK, Fastrm, the plotter).

Every call is checked: a missing executable, a timeout or a non-zero exit
status all raise ExternalToolError with the command line and the tail of
the tool's stderr.

Author: ASMplot Development Team
License: See README.md
"""

import logging
import shlex
import shutil
import subprocess
from collections import deque
from typing import Callable, List, Optional, Sequence

from ..errors import ExternalToolError

logger = logging.getLogger(__name__)

STDERR_TAIL_LINES = 50

# Signature shared by run_tool and the fakes used in tests
ToolRunner = Callable[..., subprocess.CompletedProcess]


def _stderr_tail(stderr: Optional[str], limit: int = STDERR_TAIL_LINES) -> str:
    if not stderr:
        return ""
    tail: deque = deque(stderr.splitlines(), maxlen=limit)
    return "\n".join(tail)


def run_tool(cmd: Sequence[str], timeout: Optional[float] = None) -> subprocess.CompletedProcess:
    """
    Run an external tool to completion.

    Args:
        cmd: Command line, executable first
        timeout: Seconds to wait before killing the tool (None = no limit)

    Returns:
        The completed process (stdout/stderr captured as text)

    Raises:
        ExternalToolError: If the executable is not on PATH, the tool times
            out, or it exits with a non-zero status
    """
    argv: List[str] = [str(c) for c in cmd]
    exe = argv[0]
    if not shutil.which(exe):
        raise ExternalToolError(
            f"Executable {exe!r} not found on PATH. "
            "Install it or set its location in the tools section of the configuration.",
            cmd=argv,
        )

    logger.debug(f"Running: {shlex.join(argv)}")
    try:
        proc = subprocess.run(argv, capture_output=True, text=True, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        stderr = e.stderr.decode(errors="replace") if isinstance(e.stderr, bytes) else e.stderr
        raise ExternalToolError(
            f"{exe} timed out after {timeout} seconds",
            cmd=argv,
            stderr_tail=_stderr_tail(stderr),
        )
    except OSError as e:
        raise ExternalToolError(f"Could not start {exe}: {e}", cmd=argv)

    if proc.returncode != 0:
        tail = _stderr_tail(proc.stderr)
        raise ExternalToolError(
            f"{exe} exited with code {proc.returncode}.\n"
            f"Command: {shlex.join(argv)}\n"
            f"stderr:\n{tail or '<empty>'}",
            cmd=argv,
            returncode=proc.returncode,
            stderr_tail=tail,
        )
    return proc

# ASMplot v0.1.0
# Any usage is subject to this software's license.
