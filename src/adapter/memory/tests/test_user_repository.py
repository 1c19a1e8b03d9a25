"""Unit tests for InMemoryUserRepository — verifies Port contract compliance."""

import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from adapter.memory.user_repository import InMemoryUserRepository
from domain.model.user import User


class TestInMemoryUserRepository(unittest.TestCase):
    """Tests that InMemoryUserRepository correctly implements UserRepository Protocol."""

    def setUp(self):
        self.repo = InMemoryUserRepository()

    # ── append + all ──────────────────────────────────────────

    def test_append_returns_stored_user(self):
        user = User(id=1, first_name='Jane')

        stored = self.repo.append(user)

        self.assertIs(stored, user)
        self.assertEqual(self.repo.all(), [user])

    def test_all_preserves_insertion_order(self):
        users = [User(id=i, first_name=f'user-{i}') for i in (1, 2, 3)]
        for user in users:
            self.repo.append(user)

        self.assertEqual([u.id for u in self.repo.all()], [1, 2, 3])

    def test_all_returns_backing_collection(self):
        """all() hands out the store itself, so later appends are visible."""
        snapshot = self.repo.all()
        self.repo.append(User(id=1))

        self.assertEqual(len(snapshot), 1)

    def test_empty_repository(self):
        self.assertEqual(self.repo.all(), [])
        self.assertEqual(self.repo.count(), 0)

    # ── count + next_id ───────────────────────────────────────

    def test_next_id_starts_at_one(self):
        self.assertEqual(self.repo.next_id(), 1)

    def test_next_id_is_count_plus_one(self):
        self.repo.append(User(id=1))
        self.repo.append(User(id=2))

        self.assertEqual(self.repo.count(), 2)
        self.assertEqual(self.repo.next_id(), 3)

    # ── seeding ───────────────────────────────────────────────

    def test_constructor_seeds_in_order(self):
        repo = InMemoryUserRepository([User(id=1), User(id=2)])

        self.assertEqual([u.id for u in repo.all()], [1, 2])
        self.assertEqual(repo.next_id(), 3)

    def test_separate_instances_do_not_share_state(self):
        other = InMemoryUserRepository()
        self.repo.append(User(id=1))

        self.assertEqual(other.count(), 0)

    def test_protocol_methods_present(self):
        for method in ('append', 'all', 'count', 'next_id'):
            self.assertTrue(hasattr(self.repo, method), f"missing protocol method: {method}")


if __name__ == '__main__':
    unittest.main()
