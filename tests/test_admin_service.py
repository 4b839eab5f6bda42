"""Tests for app.services.admin: paged user list and user detail."""

import unittest

from app.services import admin as admin_service
from app.services.admin import UserNotFoundError
from app.services.common import EmptyResultError, ServiceError
from support import add_posts, add_user, make_session_factory


class TestFindUserList(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()

    def tearDown(self) -> None:
        self.db.close()

    def test_pages_users_in_id_order(self) -> None:
        users = [add_user(self.db, f"user{i}@x.com") for i in range(12)]
        first = admin_service.find_user_list(self.db, 1)
        second = admin_service.find_user_list(self.db, 2)
        self.assertEqual(len(first.content), 10)
        self.assertEqual(first.content[0].email, users[0].email)
        self.assertEqual(len(second.content), 2)
        self.assertEqual(second.total_elements, 12)

    def test_no_users_is_empty(self) -> None:
        with self.assertRaises(EmptyResultError):
            admin_service.find_user_list(self.db, 1)


class TestFindUser(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()

    def tearDown(self) -> None:
        self.db.close()

    def test_detail_counts_posts(self) -> None:
        user = add_user(self.db, "admin@x.com", role="admin", name="Root")
        add_posts(self.db, user, 3)
        detail = admin_service.find_user(self.db, user.id)
        self.assertEqual(detail.email, "admin@x.com")
        self.assertEqual(detail.name, "Root")
        self.assertEqual(detail.role, "admin")
        self.assertEqual(detail.post_count, 3)

    def test_missing_user(self) -> None:
        with self.assertRaises(UserNotFoundError):
            admin_service.find_user(self.db, 42)

    def test_missing_user_error_is_a_shared_service_error(self) -> None:
        with self.assertRaises(ServiceError) as ctx:
            admin_service.find_user(self.db, 42)
        self.assertEqual(ctx.exception.message, "User 42 not found.")


if __name__ == "__main__":
    unittest.main()
