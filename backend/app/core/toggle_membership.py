"""Membership Toggle — pure like/unlike and follow/unfollow over identifier sets.

Invariants:
    - All functions are PURE: never mutate the input sequence, always return a new list
    - Result never contains duplicates; actor appears at most once
    - toggle twice with the same actor restores the original membership, opposite flag
    - Follow updates BOTH sets with the SAME decision (following drives followers)

Design Decisions:
    - Membership kept as an ordered list (insertion order preserved, not meaningful):
      maps 1:1 onto the JSON array columns without conversion
    - Empty actor raises InvalidArgumentError (not a silent no-op): callers surface it as 400
    - Persistence and atomicity belong to services/relationships.py, not here
"""

from typing import Iterable, NamedTuple

from app.core.errors import InvalidArgumentError, SelfFollowError


class ToggleResult(NamedTuple):
    members: list[str]
    added: bool


class FollowResult(NamedTuple):
    following: list[str]
    followers: list[str]
    added: bool


def toggle_membership(members: Iterable[str], actor: str) -> ToggleResult:
    """Remove actor if present, append if absent."""
    actor = _require_actor(actor, "actor")
    current = _dedupe(members)
    if actor in current:
        return ToggleResult([m for m in current if m != actor], False)
    return ToggleResult(current + [actor], True)


def set_membership(members: Iterable[str], actor: str, present: bool) -> list[str]:
    """Force actor's presence to `present`. Idempotent."""
    actor = _require_actor(actor, "actor")
    current = [m for m in _dedupe(members) if m != actor]
    return current + [actor] if present else current


def toggle_follow(
    following: Iterable[str],
    followers: Iterable[str],
    follower_id: str,
    target_id: str,
) -> FollowResult:
    """Toggle follower -> target on both sides.

    following: the follower's `following` set.
    followers: the target's `followers` set.
    """
    follower_id = _require_actor(follower_id, "follower_id")
    target_id = _require_actor(target_id, "target_id")
    if follower_id == target_id:
        raise SelfFollowError()
    new_following, added = toggle_membership(following, target_id)
    new_followers = set_membership(followers, follower_id, added)
    return FollowResult(new_following, new_followers, added)


def _require_actor(actor: str | None, field: str) -> str:
    if actor is None or not str(actor).strip():
        raise InvalidArgumentError(f"{field} must be a non-empty identifier", field)
    return str(actor)


def _dedupe(members: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for member in members or ():
        member = str(member)
        if member not in seen:
            seen.add(member)
            result.append(member)
    return result
