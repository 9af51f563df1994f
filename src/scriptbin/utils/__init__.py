from .permissions import PermissionChangeError, is_executable, set_executable
from .process import ProcessOutcome, ProcessRunner, ProcessSpawnError, SubprocessRunner

__all__ = [
    "PermissionChangeError",
    "ProcessOutcome",
    "ProcessRunner",
    "ProcessSpawnError",
    "SubprocessRunner",
    "is_executable",
    "set_executable",
]
