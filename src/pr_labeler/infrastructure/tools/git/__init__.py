from pr_labeler.infrastructure.tools.git.git_cli_adapter import GitCliAdapter

__all__ = ["GitCliAdapter"]
