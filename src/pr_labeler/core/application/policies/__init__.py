from pr_labeler.core.application.policies.retry_policy import RateLimitRetryPolicy

__all__ = ["RateLimitRetryPolicy"]
