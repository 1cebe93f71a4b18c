"""Candidate profile entity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserProfile:
    """The parts of a user's profile that feed prompts and fallbacks.

    Attributes:
        user_id: Stable identifier, used in per-user cache keys
        name: Display name used to sign generated letters
        industry: Industry the user works in (e.g. "Data Science")
        experience: Years of experience
        skills: Skills the user already has, in the order they entered them
        bio: Free-text professional background
    """

    user_id: str = ""
    name: str | None = None
    industry: str | None = None
    experience: int | None = None
    skills: tuple[str, ...] = field(default_factory=tuple)
    bio: str | None = None
