from pr_labeler.infrastructure.tools.vcs.github.github_http_client import GitHubHttpClient
from pr_labeler.infrastructure.tools.vcs.github.github_rest_adapter import GitHubRestAdapter, is_rate_limited

__all__ = ["GitHubHttpClient", "GitHubRestAdapter", "is_rate_limited"]
