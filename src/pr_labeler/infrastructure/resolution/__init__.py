from pr_labeler.infrastructure.resolution.container import LabelerRuntime, build_runtime

__all__ = ["LabelerRuntime", "build_runtime"]
