import os
from dataclasses import dataclass
from pathlib import Path

from epp_launcher.errors import DirectoryExistsError

TOTAL_TIME = "total_time.txt"
BLANT_TIME = "blant_time.txt"
EPP_TIME = "epp_time.txt"
RUN_LOG = "launcher.log"


def output_dir_name(k: str, n: str, e: str) -> str:
    return f"k{k}-n{n}-e{e}-output"


@dataclass(frozen=True, slots=True)
class OutputDir:
    root: Path

    @classmethod
    def for_params(cls, k: str, n: str, e: str, *, base_dir: Path = Path(".")) -> "OutputDir":
        return cls(base_dir / output_dir_name(k, n, e))

    def prepare(self) -> None:
        # lexists: a dangling symlink or a plain file also blocks the name
        if os.path.lexists(self.root):
            raise DirectoryExistsError(self.display)
        try:
            self.root.mkdir()
        except FileExistsError:
            raise DirectoryExistsError(self.display) from None

    @property
    def display(self) -> str:
        s = str(self.root)
        if self.root.is_absolute() or s.startswith("."):
            return s
        return f"./{s}"

    @property
    def total_time_file(self) -> Path:
        return self.root / TOTAL_TIME

    @property
    def blant_time_file(self) -> Path:
        return self.root / BLANT_TIME

    @property
    def epp_time_file(self) -> Path:
        return self.root / EPP_TIME

    @property
    def run_log_file(self) -> Path:
        return self.root / RUN_LOG
