"""Membership fact for groups."""

from collections.abc import Sized
from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True, slots=True)
class MembershipFact:
    """Member count of a group."""

    member_count: int = 0

    def __post_init__(self) -> None:
        if self.member_count < 0:
            msg = f"member_count must be non-negative, got {self.member_count}"
            raise ValueError(msg)

    @classmethod
    def from_members(cls, members: Sized | None) -> Self:
        """Build from a member list; a missing list counts as zero members."""
        return cls(member_count=len(members) if members is not None else 0)
