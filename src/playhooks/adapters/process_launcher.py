"""Process launcher adapter backed by subprocess."""

from __future__ import annotations

import os
import subprocess
from typing import Mapping, Sequence


class SubprocessLauncher:
    """Starts commands with the parent environment plus extra variables.

    Standard streams are inherited; output is neither captured nor forwarded.
    """

    def __init__(self, base_env: Mapping[str, str] | None = None):
        self._base_env = base_env

    def launch(self, argv: Sequence[str], env: Mapping[str, str]) -> subprocess.Popen:
        merged = dict(os.environ if self._base_env is None else self._base_env)
        merged.update(env)
        return subprocess.Popen(list(argv), env=merged)
