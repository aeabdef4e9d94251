class LauncherError(Exception):
    exit_code: int = 1


class UsageError(LauncherError):
    def __init__(self, message: str = "", *, show_usage: bool = True):
        super().__init__(message)
        self.show_usage = show_usage


class DirectoryExistsError(LauncherError):
    def __init__(self, path):
        super().__init__(f"Directory {path} already exists.")
        self.path = path


class MissingToolError(LauncherError):
    def __init__(self, role: str, value: str):
        super().__init__(f"[{role}] executable not found: {value}")
        self.role = role
        self.value = value
