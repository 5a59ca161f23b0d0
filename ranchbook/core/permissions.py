"""Role hierarchy and the route-level permission table.

Roles form a total order ``owner > admin > partner``. Every guarded
route names an :class:`Action`; the table below maps each action to the
set of roles allowed to perform it.
"""

import enum
from typing import Iterable

from ranchbook.core.errors import Forbidden


class Role(str, enum.Enum):
    PARTNER = "partner"
    ADMIN = "admin"
    OWNER = "owner"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def at_least(self, other: "Role") -> bool:
        return self.rank >= Role(other).rank

    @classmethod
    def parse(cls, value) -> "Role":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                "role must be one of: {}".format(", ".join(r.value for r in cls))
            ) from None


_RANKS = {Role.PARTNER: 0, Role.ADMIN: 1, Role.OWNER: 2}


def roles_from(minimum: Role) -> frozenset:
    return frozenset(role for role in Role if role.at_least(minimum))


ANY_ROLE = roles_from(Role.PARTNER)


class Action(str, enum.Enum):
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    CHANGE_ROLE = "change_role"
    DEACTIVATE_USER = "deactivate_user"
    MANAGE_SELF = "manage_self"


PERMISSIONS = {
    Action.READ: ANY_ROLE,
    Action.CREATE: ANY_ROLE,
    Action.UPDATE: ANY_ROLE,
    Action.DELETE: roles_from(Role.ADMIN),
    Action.CHANGE_ROLE: frozenset({Role.OWNER}),
    Action.DEACTIVATE_USER: frozenset({Role.OWNER}),
    Action.MANAGE_SELF: ANY_ROLE,
}


def authorize(actor_role, required_roles: Iterable[Role]) -> bool:
    try:
        role = Role(actor_role)
    except ValueError:
        return False
    return role in frozenset(required_roles)


def is_allowed(actor_role, action: Action) -> bool:
    return authorize(actor_role, PERMISSIONS[action])


def ensure_allowed(actor_role, action: Action) -> None:
    if not is_allowed(actor_role, action):
        raise Forbidden()


def ensure_not_self(actor_id: str, target_id: str, verb: str) -> None:
    if actor_id == target_id:
        raise Forbidden("You cannot {} your own account".format(verb))


__all__ = [
    "ANY_ROLE",
    "Action",
    "PERMISSIONS",
    "Role",
    "authorize",
    "ensure_allowed",
    "ensure_not_self",
    "is_allowed",
    "roles_from",
]
