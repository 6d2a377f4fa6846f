"""
Visibility scope - which jobs a caller may aggregate over.

Two kinds only:
- UnrestrictedScope: ADMIN callers, no job filter is applied
- RestrictedScope:   HR callers, only the jobs they created

Queries dispatch on the scope kind instead of a boolean flag, so an
unrestricted scope can never carry a stale job id list.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Union


@dataclass(frozen=True)
class UnrestrictedScope:
    """Every job is visible."""

    def is_empty(self) -> bool:
        return False


@dataclass(frozen=True)
class RestrictedScope:
    """Only the listed job ids are visible."""
    job_ids: FrozenSet[str]

    @classmethod
    def of(cls, job_ids: Iterable[str]) -> "RestrictedScope":
        return cls(frozenset(job_ids))

    def is_empty(self) -> bool:
        return not self.job_ids

    def sorted_ids(self):
        # Sorted so generated SQL is stable across requests
        return sorted(self.job_ids)


Scope = Union[UnrestrictedScope, RestrictedScope]

UNRESTRICTED = UnrestrictedScope()
