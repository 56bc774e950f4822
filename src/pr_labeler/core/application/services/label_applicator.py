from dataclasses import dataclass, field

import structlog

from pr_labeler.core.application.exceptions import APIError, LabelPermissionError
from pr_labeler.core.application.policies.retry_policy import RateLimitRetryPolicy
from pr_labeler.core.application.ports import RepositoryPort
from pr_labeler.core.domain.config import LabelPolicyConfig
from pr_labeler.core.domain.labels import LabelDecisions, LabelUpdate, extract_namespace, replace_namespaces
from pr_labeler.core.domain.pull_request import PullRequestRef

logger = structlog.get_logger()


@dataclass(frozen=True, kw_only=True)
class LabelDiff:
    to_add: list[str] = field(default_factory=list)
    to_remove: list[str] = field(default_factory=list)


def _strip_wildcard(token: str) -> str:
    return token[:-2] if token.endswith("/*") else token


def calculate_label_diff(
    decisions: LabelDecisions, current: list[str], policy: LabelPolicyConfig
) -> LabelDiff:
    """Labels to add (absent ones only) and present labels to drop from exclusive namespaces.

    A namespace is cleared when a label being added belongs to a replace
    namespace, or when the decisions name it in ``namespaces_to_clear``.
    Labels being added are never removed.
    """
    wanted = list(dict.fromkeys(decisions.labels_to_add))
    exclusive = {_strip_wildcard(t) for t in decisions.labels_to_remove}
    exclusive.update(replace_namespaces(policy.namespace_policies))
    cleared = {extract_namespace(label) for label in wanted} & exclusive
    cleared.update(_strip_wildcard(t) for t in decisions.namespaces_to_clear)

    to_remove = [
        present
        for present in dict.fromkeys(current)
        if present not in wanted and extract_namespace(present) in cleared
    ]
    to_add = [label for label in wanted if label not in current]
    return LabelDiff(to_add=to_add, to_remove=to_remove)


class LabelApplicator:
    """Brings the live PR label set in line with the decisions: removals first, then one batched add."""

    def __init__(self, remote: RepositoryPort, retry_policy: RateLimitRetryPolicy | None = None) -> None:
        self._remote = remote
        self._retry = retry_policy or RateLimitRetryPolicy()

    async def apply_labels(
        self, pr: PullRequestRef, decisions: LabelDecisions, policy: LabelPolicyConfig
    ) -> LabelUpdate:
        current = await self._retry.run(lambda: self._remote.list_labels(pr))
        update = LabelUpdate(api_call_count=1)
        diff = calculate_label_diff(decisions, current, policy)
        logger.info("Label diff computed", to_add=diff.to_add, to_remove=diff.to_remove)

        for index, label in enumerate(diff.to_remove):
            update.api_call_count += 1
            try:
                await self._retry.run(lambda label=label: self._remote.remove_label(pr, label))
            except APIError as exc:
                if exc.status == 404:
                    logger.info("Label already absent, skipping removal", label=label)
                    update.skipped.append(label)
                    continue
                if exc.status == 403 and not exc.rate_limited:
                    update.skipped.extend(diff.to_remove[index:] + diff.to_add)
                    raise self._permission_error(exc, update) from exc
                raise
            update.removed.append(label)
            logger.info("Removed label", label=label)

        if diff.to_add:
            update.api_call_count += 1
            try:
                await self._retry.run(lambda: self._remote.add_labels(pr, diff.to_add))
            except APIError as exc:
                if exc.status == 403 and not exc.rate_limited:
                    update.skipped.extend(diff.to_add)
                    raise self._permission_error(exc, update) from exc
                raise
            update.added.extend(diff.to_add)
            logger.info("Added labels", labels=diff.to_add)

        return update

    @staticmethod
    def _permission_error(cause: APIError, update: LabelUpdate) -> LabelPermissionError:
        logger.warning("Insufficient permission to edit labels", skipped=update.skipped)
        return LabelPermissionError(f"Insufficient permission to edit labels: {cause}", update=update)
