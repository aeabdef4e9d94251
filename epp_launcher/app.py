import sys

from epp_launcher.config import Config
from epp_launcher.errors import LauncherError, UsageError
from epp_launcher.launcher import Launcher
from epp_launcher.options import USAGE, help_text, parse_args


class App:
    def __init__(self, *, cfg: Config | None = None):
        self.cfg = cfg

    def run(self, argv: list[str] | None = None) -> int:
        argv = sys.argv[1:] if argv is None else list(argv)
        try:
            opt = parse_args(argv)
            if opt.help_requested:
                print(help_text())
                return 0
            opt.validate()
            cfg = self._load_cfg()
            if cfg is None:
                return 1
            return Launcher(cfg=cfg).run(opt)
        except UsageError as exc:
            msg = str(exc)
            if msg:
                print(msg, file=sys.stderr)
            if exc.show_usage:
                print(USAGE)
            return exc.exit_code
        except LauncherError as exc:
            print(str(exc), file=sys.stderr)
            return exc.exit_code

    def _load_cfg(self) -> Config | None:
        if self.cfg is not None:
            return self.cfg
        try:
            return Config.from_env()
        except ValueError as exc:
            print(f"[config] {exc}", file=sys.stderr)
            return None


def main(argv: list[str] | None = None) -> None:
    raise SystemExit(App().run(argv))
