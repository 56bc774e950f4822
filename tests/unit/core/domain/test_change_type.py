import pytest

from pr_labeler.core.domain.pull_request import ChangeType, detect_change_type


@pytest.mark.parametrize(
    ("subject", "expected"),
    [
        ("feat: add login form", ChangeType.FEATURE),
        ("feat(auth): add OAuth provider", ChangeType.FEATURE),
        ("feat!: drop python 3.11", ChangeType.FEATURE),
        ("fix: handle empty diff", ChangeType.FIX),
        ("refactor(core): split extractor", ChangeType.REFACTOR),
        ("docs: update README", ChangeType.DOCS),
        ("test: cover applicator", ChangeType.TEST),
        ("style: reformat", ChangeType.STYLE),
        ("chore(deps): bump httpx", ChangeType.CHORE),
        ("Refactor: capitalised prefix", ChangeType.REFACTOR),
    ],
)
def test_detects_conventional_prefixes(subject: str, expected: ChangeType) -> None:
    assert detect_change_type(subject) == expected


@pytest.mark.parametrize("subject", ["Add login form", "featuring: something", "wip", "", "feat:missing space"])
def test_unrecognised_subjects_are_unknown(subject: str) -> None:
    assert detect_change_type(subject) == ChangeType.UNKNOWN
