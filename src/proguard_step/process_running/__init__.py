"""Process running domain exports."""

from .tool_process import CommandRunner, build_tool_command, locate_tool_artifact, run_tool

__all__ = ["CommandRunner", "build_tool_command", "locate_tool_artifact", "run_tool"]
