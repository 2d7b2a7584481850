"""Access policy — who may do what to which resource.

Learn: Every role and ownership rule lives in the POLICY table instead of
being re-typed as string comparisons in each route. A Rule says which
roles may attempt an action, and optionally which ownership predicate the
target resource must satisfy. authorize() is the single evaluator:

    authorize(identity, Action.SESSION_UPDATE, session)  # raises Forbidden

List endpoints don't authorize row by row. They filter with the scopes
at the bottom of this module.

Known gaps (no check is made):
- feedback:create does not check that session_id exists or that the
  submitter took part in it.
- feedback:read_session lets any authenticated user read every piece of
  feedback for any session id.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from mentorhub.auth.dependencies import CurrentIdentity
from mentorhub.db.models import Feedback, Role, Session
from mentorhub.errors import Forbidden

Ownership = Callable[[CurrentIdentity, Any], bool]

ALL_ROLES = frozenset(Role)


class Action(str, Enum):
    SESSION_CREATE = "session:create"
    SESSION_READ = "session:read"
    SESSION_UPDATE = "session:update"
    SESSION_DELETE = "session:delete"
    FEEDBACK_CREATE = "feedback:create"
    FEEDBACK_READ_SESSION = "feedback:read_session"
    FEEDBACK_UPDATE = "feedback:update"
    FEEDBACK_DELETE = "feedback:delete"


@dataclass(frozen=True)
class Rule:
    roles: frozenset[Role] = ALL_ROLES
    owns: Optional[Ownership] = None
    denied: str = "Access denied."


# ─── Ownership predicates ───────────────────────────────


def is_session_mentor(identity: CurrentIdentity, session: Session) -> bool:
    return session.mentor_id == identity.id


def is_session_participant(identity: CurrentIdentity, session: Session) -> bool:
    return identity.id in (session.mentor_id, session.mentee_id)


def is_feedback_author(identity: CurrentIdentity, feedback: Feedback) -> bool:
    return feedback.user_id == identity.id


# ─── Policy table ───────────────────────────────────────

POLICY: dict[Action, Rule] = {
    Action.SESSION_CREATE: Rule(
        roles=frozenset({Role.MENTOR}),
        denied="Only mentors can create sessions.",
    ),
    Action.SESSION_READ: Rule(owns=is_session_participant),
    Action.SESSION_UPDATE: Rule(
        owns=is_session_mentor,
        denied="Only the mentor can update the session.",
    ),
    Action.SESSION_DELETE: Rule(
        owns=is_session_mentor,
        denied="Only the mentor can delete the session.",
    ),
    Action.FEEDBACK_CREATE: Rule(),
    Action.FEEDBACK_READ_SESSION: Rule(),
    Action.FEEDBACK_UPDATE: Rule(
        owns=is_feedback_author,
        denied="You can only update your own feedback.",
    ),
    Action.FEEDBACK_DELETE: Rule(
        owns=is_feedback_author,
        denied="You can only delete your own feedback.",
    ),
}


def is_allowed(identity: CurrentIdentity, action: Action, resource: Any = None) -> bool:
    rule = POLICY[action]
    if identity.role not in rule.roles:
        return False
    if rule.owns is not None:
        return resource is not None and rule.owns(identity, resource)
    return True


def authorize(identity: CurrentIdentity, action: Action, resource: Any = None) -> None:
    """Raise Forbidden (with the rule's message) unless the action is allowed."""
    if not is_allowed(identity, action, resource):
        raise Forbidden(POLICY[action].denied)


# ─── List scopes ────────────────────────────────────────

# Mentors list sessions they run, mentees sessions they attend. The filter
# is chosen by role only, never by matching both fields.
_SESSION_SCOPES: dict[Role, Ownership] = {
    Role.MENTOR: is_session_mentor,
    Role.MENTEE: lambda identity, session: session.mentee_id == identity.id,
}


def session_scope(identity: CurrentIdentity) -> Callable[[Session], bool]:
    owns = _SESSION_SCOPES[identity.role]
    return lambda session: owns(identity, session)


def feedback_scope(identity: CurrentIdentity) -> Callable[[Feedback], bool]:
    return lambda feedback: is_feedback_author(identity, feedback)
