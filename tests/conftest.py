import os
import shutil
from pathlib import Path

import pytest

from epp_launcher.config import Config

FAKE_TIME = """#!/bin/sh
# time -v -o FILE CMD...
[ "$1" = "-v" ] && shift
[ "$1" = "-o" ] || exit 125
out="$2"
shift 2
"$@"
rc=$?
printf 'Command being timed: "%s"\\nExit status: %s\\n' "$*" "$rc" > "$out"
exit $rc
"""

FAKE_BLANT = """#!/bin/sh
echo "blant $*" >> "$STUB_TRACE"
printf '1 2 3\\n4 5 6\\n7 8 9\\n'
exit ${BLANT_RC:-0}
"""

FAKE_EPP = """#!/bin/sh
out=
for a in "$@"; do
  case "$a" in -o*) out="${a#-o}" ;; esac
done
lines=$(wc -l | tr -d ' ')
echo "epp $* lines=$lines" >> "$STUB_TRACE"
echo "Covered $lines lines of input" > "$out/epp_stats.txt"
exit ${EPP_RC:-0}
"""


def write_script(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    path.chmod(0o755)
    return path


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch) -> Path:
    run_dir = tmp_path / "run"
    run_dir.mkdir()
    monkeypatch.chdir(run_dir)
    monkeypatch.setenv("STUB_TRACE", str(tmp_path / "trace.txt"))
    monkeypatch.delenv("BLANT_RC", raising=False)
    monkeypatch.delenv("EPP_RC", raising=False)
    return run_dir


@pytest.fixture
def trace_path(tmp_path: Path) -> Path:
    return tmp_path / "trace.txt"


@pytest.fixture
def stub_cfg(tmp_path: Path, workspace: Path) -> Config:
    if shutil.which("sh") is None:
        pytest.skip("needs a POSIX shell")
    bin_dir = tmp_path / "bin"
    dataset = tmp_path / "HI-union.el"
    dataset.write_text("a b\n", encoding="utf-8")
    return Config(
        blant=str(write_script(bin_dir / "blant-mp.sh", FAKE_BLANT)),
        input_path=str(dataset),
        time_bin=str(write_script(bin_dir / "time", FAKE_TIME)),
        epp=str(write_script(bin_dir / "epp", FAKE_EPP)),
    )


def read_trace(path: Path) -> list[str]:
    if not path.exists():
        return []
    return path.read_text(encoding="utf-8").splitlines()


@pytest.fixture
def clean_env(monkeypatch):
    for k in list(os.environ):
        if k.startswith("EPP_"):
            monkeypatch.delenv(k, raising=False)
