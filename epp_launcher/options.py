"""
getopts-style flag scanning for the launcher (`hk:n:e:`).

Flags are processed left to right. A value may be attached (`-k5`) or given as
the next argument (`-k 5`), and flags without values may be clustered (`-hk5`).
Scanning stops at `--` or at the first argument that is not a flag.
"""

from dataclasses import dataclass

from epp_launcher.errors import UsageError

PROG = "epp.sh"
VALUE_FLAGS = ("k", "n", "e")

USAGE = f"Usage: {PROG} -k <k> -n <n> [-e <e>] [-h]"

DESCRIPTION = (
    "A wrapper around the epp executable meant to facilitate running \n"
    "it in its intended manner: as an extension TO BLANT. This script will \n"
    "pass the parameters k and n to BLANT as expected, but also pass k \n"
    "and optionally e to epp, as well as create a folder for the output named based \n"
    "on the parameters."
)


@dataclass(frozen=True, slots=True)
class Options:
    k: str | None = None
    n: str | None = None
    e: str | None = None
    help_requested: bool = False

    def validate(self) -> None:
        if not self.k or not self.n:
            raise UsageError()

    def with_default_e(self, default_e: str) -> "Options":
        if self.e is not None:
            return self
        return Options(k=self.k, n=self.n, e=default_e, help_requested=self.help_requested)


def help_text() -> str:
    return f"{DESCRIPTION}\n\n{USAGE}"


def parse_args(argv: list[str]) -> Options:
    values: dict[str, str] = {}
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            break
        if not arg.startswith("-") or arg == "-":
            break
        j = 1
        while j < len(arg):
            ch = arg[j]
            if ch in VALUE_FLAGS:
                attached = arg[j + 1 :]
                if attached:
                    values[ch] = attached
                else:
                    i += 1
                    if i >= len(argv):
                        raise UsageError(f"Invalid option: -{ch} requires a value", show_usage=False)
                    values[ch] = argv[i]
                break
            # `-h` and anything unrecognized both mean "show help"
            return Options(help_requested=True)
        i += 1
    return Options(k=values.get("k"), n=values.get("n"), e=values.get("e"))
