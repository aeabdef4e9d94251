import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping

EXIT_POLICIES = ("last", "any")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Config:
    # Collaborators
    blant: str = "/home/wayne/pub/cs295p/blant-mp.sh"
    input_path: str = "/extra/wayne1/preserve/cs295p/EdgePrediction/HI-union.el"
    time_bin: str = "/usr/bin/time"
    epp: str = "./epp"

    # Invocation defaults
    default_e: str = "8"
    base_dir: Path = Path(".")

    # Exit status of the piped stages:
    # - last: status of the last stage wins (plain `sh` pipe)
    # - any:  non-zero if any stage fails (`bash -o pipefail`)
    exit_policy: str = "last"

    # Write <out-dir>/launcher.log
    run_log: bool = True
    # Resolve time/BLANT/epp before creating the output directory
    check_tools: bool = True

    def __post_init__(self):
        if self.exit_policy not in EXIT_POLICIES:
            raise ValueError(f"invalid exit policy {self.exit_policy!r} (expected one of {', '.join(EXIT_POLICIES)})")

    # -------- Derived values (read-only) --------
    @property
    def shell(self) -> str:
        return "bash" if self.exit_policy == "any" else "sh"

    @property
    def tools(self) -> list[tuple[str, str]]:
        return [("time", self.time_bin), ("blant", self.blant), ("epp", self.epp)]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        env = os.environ if environ is None else environ
        cfg = cls()
        updates: dict[str, object] = {}
        for var, field_name in (
            ("EPP_BLANT", "blant"),
            ("EPP_INPUT", "input_path"),
            ("EPP_TIME", "time_bin"),
            ("EPP_BIN", "epp"),
            ("EPP_DEFAULT_E", "default_e"),
            ("EPP_EXIT_POLICY", "exit_policy"),
        ):
            value = env.get(var)
            if value:
                updates[field_name] = value.strip()
        base_dir = env.get("EPP_BASE_DIR")
        if base_dir:
            updates["base_dir"] = Path(os.path.expanduser(base_dir))
        for var, field_name in (("EPP_RUN_LOG", "run_log"), ("EPP_CHECK_TOOLS", "check_tools")):
            if var in env:
                updates[field_name] = _parse_bool(var, env[var])
        return replace(cfg, **updates)


def _parse_bool(name: str, raw: str) -> bool:
    s = (raw or "").strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {raw!r}")
