"""
Launch BLANT piped into epp with per-stage resource timing.
"""

from epp_launcher.config import Config
from epp_launcher.errors import DirectoryExistsError, LauncherError, MissingToolError, UsageError
from epp_launcher.launcher import Launcher
from epp_launcher.options import Options

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DirectoryExistsError",
    "Launcher",
    "LauncherError",
    "MissingToolError",
    "Options",
    "UsageError",
]
