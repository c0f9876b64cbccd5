"""orchestrator — end-to-end compile pipeline."""

from amigurumi.orchestrator.pipeline import PipelineError, build_rows, compile_pattern

__all__ = ["PipelineError", "build_rows", "compile_pattern"]
