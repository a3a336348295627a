"""Domain ports (protocols)."""

from bundledruntime.domain.ports.tool_runner import ToolRunnerProtocol
from bundledruntime.domain.ports.toolchain import ToolchainResolverProtocol

__all__ = [
    "ToolRunnerProtocol",
    "ToolchainResolverProtocol",
]
