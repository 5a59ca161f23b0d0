import unittest

from ranchbook.core.errors import Forbidden
from ranchbook.core.permissions import (
    PERMISSIONS,
    Action,
    Role,
    authorize,
    ensure_allowed,
    ensure_not_self,
    is_allowed,
)


class RoleHierarchyTest(unittest.TestCase):
    def test_total_order(self):
        self.assertTrue(Role.OWNER.at_least(Role.ADMIN))
        self.assertTrue(Role.ADMIN.at_least(Role.PARTNER))
        self.assertTrue(Role.PARTNER.at_least(Role.PARTNER))
        self.assertFalse(Role.PARTNER.at_least(Role.ADMIN))
        self.assertFalse(Role.ADMIN.at_least(Role.OWNER))

    def test_parse_accepts_known_roles_only(self):
        self.assertEqual(Role.parse("admin"), Role.ADMIN)
        for value in (" admin ", "Admin", " OWNER "):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    Role.parse(value)
        with self.assertRaises(ValueError):
            Role.parse("superuser")
        with self.assertRaises(ValueError):
            Role.parse(None)


class PermissionTableTest(unittest.TestCase):
    def test_table(self):
        everyone = {Role.PARTNER, Role.ADMIN, Role.OWNER}
        expected = {
            Action.READ: everyone,
            Action.CREATE: everyone,
            Action.UPDATE: everyone,
            Action.DELETE: {Role.ADMIN, Role.OWNER},
            Action.CHANGE_ROLE: {Role.OWNER},
            Action.DEACTIVATE_USER: {Role.OWNER},
            Action.MANAGE_SELF: everyone,
        }
        self.assertEqual({action: set(roles) for action, roles in PERMISSIONS.items()}, expected)

    def test_partner_cannot_delete(self):
        self.assertFalse(is_allowed("partner", Action.DELETE))
        self.assertTrue(is_allowed("admin", Action.DELETE))
        with self.assertRaises(Forbidden):
            ensure_allowed("partner", Action.DELETE)

    def test_only_owner_manages_users(self):
        for action in (Action.CHANGE_ROLE, Action.DEACTIVATE_USER):
            with self.subTest(action=action):
                self.assertTrue(is_allowed("owner", action))
                self.assertFalse(is_allowed("admin", action))
                self.assertFalse(is_allowed("partner", action))

    def test_unknown_role_is_denied(self):
        self.assertFalse(authorize("rancher", {Role.PARTNER}))
        self.assertFalse(authorize(None, PERMISSIONS[Action.READ]))

    def test_self_protection(self):
        with self.assertRaises(Forbidden):
            ensure_not_self("owner-1", "owner-1", "deactivate")
        ensure_not_self("owner-1", "partner-1", "deactivate")


if __name__ == "__main__":
    unittest.main()
