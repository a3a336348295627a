"""Infrastructure adapters: processes, JDK discovery, config files."""

from bundledruntime.infrastructure.config_loader import load_config
from bundledruntime.infrastructure.subprocess_runner import SubprocessToolRunner
from bundledruntime.infrastructure.toolchain import JdkToolchainResolver

__all__ = [
    "JdkToolchainResolver",
    "SubprocessToolRunner",
    "load_config",
]
