import shlex
import shutil
import time

from epp_launcher.config import Config
from epp_launcher.errors import MissingToolError
from epp_launcher.logutil import RunLog, console
from epp_launcher.options import Options
from epp_launcher.util.outdir import OutputDir
from epp_launcher.util.processes import run_foreground


class Launcher:
    def __init__(self, *, cfg: Config):
        self.cfg = cfg

    def output_dir(self, opt: Options) -> OutputDir:
        return OutputDir.for_params(opt.k, opt.n, opt.e, base_dir=self.cfg.base_dir)

    def check_tools(self) -> None:
        for role, value in self.cfg.tools + [("shell", self.cfg.shell)]:
            if shutil.which(value) is None:
                raise MissingToolError(role, value)

    def timed(self, report: str, argv: list[str]) -> list[str]:
        return [self.cfg.time_bin, "-v", "-o", report] + argv

    def blant_argv(self, opt: Options) -> list[str]:
        return [self.cfg.blant, f"-k{opt.k}", f"-n{opt.n}", self.cfg.input_path]

    def epp_argv(self, opt: Options, out: OutputDir) -> list[str]:
        return [self.cfg.epp, f"-k{opt.k}", f"-e{opt.e}", f"-o{out.display}"]

    def build_command(self, opt: Options, out: OutputDir) -> list[str]:
        out_s = out.display
        stage1 = self.timed(f"{out_s}/{out.blant_time_file.name}", self.blant_argv(opt))
        stage2 = self.timed(f"{out_s}/{out.epp_time_file.name}", self.epp_argv(opt, out))
        script = f"{shlex.join(stage1)} | {shlex.join(stage2)}"
        shell = [self.cfg.shell]
        if self.cfg.exit_policy == "any":
            shell += ["-o", "pipefail"]
        return self.timed(f"{out_s}/{out.total_time_file.name}", shell + ["-c", script])

    def run(self, opt: Options) -> int:
        opt = opt.with_default_e(self.cfg.default_e)
        opt.validate()
        out = self.output_dir(opt)

        if self.cfg.check_tools:
            self.check_tools()
        out.prepare()

        cmd = self.build_command(opt, out)
        with RunLog(out.run_log_file if self.cfg.run_log else None) as log:
            log.info(
                f"k={opt.k} n={opt.n} e={opt.e} out_dir={out.display} "
                f"exit_policy={self.cfg.exit_policy} blant={self.cfg.blant} epp={self.cfg.epp} "
                f"input={self.cfg.input_path} time={self.cfg.time_bin}"
            )
            log.info(f"command: {shlex.join(cmd)}")
            console("Launcher", f"out_dir={out.display} k={opt.k} n={opt.n} e={opt.e}")

            started = time.monotonic()
            rc = run_foreground(cmd)
            elapsed = time.monotonic() - started

            log.info(f"pipeline exited rc={rc} elapsed={elapsed:.3f}s")
            console("Launcher", f"pipeline exited rc={rc} elapsed={elapsed:.1f}s")
            return rc
