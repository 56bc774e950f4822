from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class PullRequestRef:
    owner: str
    repo: str
    number: int
    base_sha: str
    head_sha: str

    def __post_init__(self) -> None:
        if not self.owner or not self.repo:
            raise ValueError("Repository owner and name are required.")
        if self.number <= 0:
            raise ValueError(f"Invalid pull request number: {self.number}")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
