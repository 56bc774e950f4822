from dataclasses import dataclass
from enum import StrEnum


class CICheckStatus(StrEnum):
    PASSED = "passed"
    FAILED = "failed"
    PENDING = "pending"
    UNKNOWN = "unknown"


@dataclass(frozen=True, kw_only=True)
class CIStatus:
    tests: CICheckStatus = CICheckStatus.UNKNOWN
    type_check: CICheckStatus = CICheckStatus.UNKNOWN
    build: CICheckStatus = CICheckStatus.UNKNOWN
    lint: CICheckStatus = CICheckStatus.UNKNOWN

    def checks(self) -> tuple[CICheckStatus, ...]:
        return (self.tests, self.type_check, self.build, self.lint)
