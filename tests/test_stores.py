"""Tests for the credential store (app.services.users) and record store (app.services.decisions)."""

import unittest
from unittest.mock import patch

from app.core.errors import ConflictError
from app.models import Decision, User
from app.services.decisions import (
    MAX_DECISION_ID,
    create_decision,
    delete_decision,
    get_decision,
    list_decisions,
    update_decision,
)
from app.services.users import create_user, find_user_by_email, get_user_by_id
from tests import support


class TestCredentialStore(support.DatabaseTestCase):
    def test_missing_email_returns_none(self) -> None:
        self.assertIsNone(find_user_by_email(self.db, "nobody@example.com"))

    def test_create_then_find_from_another_session(self) -> None:
        user = create_user(self.db, "alice@example.com", "$2b$04$hash")
        self.assertIsNotNone(user.id)
        self.assertIsNotNone(user.created_at)

        other = self.SessionLocal()
        try:
            found = find_user_by_email(other, "alice@example.com")
            self.assertIsNotNone(found)
            self.assertEqual(found.id, user.id)
            self.assertEqual(get_user_by_id(other, user.id).email, "alice@example.com")
        finally:
            other.close()

    def test_lookup_is_exact(self) -> None:
        create_user(self.db, "alice@example.com", "$2b$04$hash")
        self.assertIsNone(find_user_by_email(self.db, "ALICE@example.com"))

    def test_duplicate_email_conflicts_and_does_not_overwrite(self) -> None:
        create_user(self.db, "alice@example.com", "first-hash")
        with self.assertRaises(ConflictError):
            create_user(self.db, "alice@example.com", "second-hash")
        self.assertEqual(find_user_by_email(self.db, "alice@example.com").password_hash, "first-hash")
        self.assertEqual(self.db.query(User).count(), 1)

    def test_unique_index_enforces_when_precheck_is_raced(self) -> None:
        create_user(self.db, "alice@example.com", "first-hash")
        # Simulate a concurrent registration that passed its pre-check before the first insert.
        with patch("app.services.users.find_user_by_email", return_value=None):
            with self.assertRaises(ConflictError):
                create_user(self.db, "alice@example.com", "second-hash")
        # Session is usable after the rollback.
        self.assertEqual(self.db.query(User).count(), 1)


class TestRecordStore(support.DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice = create_user(self.db, "alice@example.com", "hash")
        self.bob = create_user(self.db, "bob@example.com", "hash")

    def test_create_assigns_id_timestamp_and_empty_description(self) -> None:
        decision = create_decision(self.db, self.alice.id, "Move cities", None, "Personal")
        self.assertIsNotNone(decision.id)
        self.assertIsNotNone(decision.created_at)
        self.assertEqual(decision.description, "")
        self.assertEqual(get_decision(self.db, decision.id).title, "Move cities")

    def test_list_is_newest_first_and_scoped(self) -> None:
        first = create_decision(self.db, self.alice.id, "First", "", "Career")
        second = create_decision(self.db, self.alice.id, "Second", "", "Health")
        create_decision(self.db, self.bob.id, "Bob's", "", "Other")
        third = create_decision(self.db, self.alice.id, "Third", "", "Finance")

        ids = [d.id for d in list_decisions(self.db, self.alice.id)]
        self.assertEqual(ids, [third.id, second.id, first.id])

    def test_list_for_user_without_records_is_empty(self) -> None:
        self.assertEqual(list_decisions(self.db, self.bob.id), [])

    def test_update_applies_only_supplied_fields(self) -> None:
        decision = create_decision(self.db, self.alice.id, "Old", "keep me", "Career")
        updated = update_decision(self.db, decision.id, self.alice.id, {"title": "New", "category": None})
        self.assertEqual(updated.title, "New")
        self.assertEqual(updated.description, "keep me")
        self.assertEqual(updated.category, "Career")

    def test_update_ignores_unknown_fields(self) -> None:
        decision = create_decision(self.db, self.alice.id, "Title", "", "Career")
        updated = update_decision(
            self.db, decision.id, self.alice.id, {"user_id": self.bob.id, "description": "x"}
        )
        self.assertEqual(updated.user_id, self.alice.id)
        self.assertEqual(updated.description, "x")

    def test_update_with_no_fields_returns_owned_record(self) -> None:
        decision = create_decision(self.db, self.alice.id, "Title", "", "Career")
        self.assertEqual(update_decision(self.db, decision.id, self.alice.id, {}).id, decision.id)
        self.assertIsNone(update_decision(self.db, decision.id, self.bob.id, {}))

    def test_update_requires_owner_match(self) -> None:
        decision = create_decision(self.db, self.alice.id, "Title", "", "Career")
        self.assertIsNone(update_decision(self.db, decision.id, self.bob.id, {"title": "Hijacked"}))
        self.assertEqual(get_decision(self.db, decision.id).title, "Title")

    def test_update_missing_record_returns_none(self) -> None:
        self.assertIsNone(update_decision(self.db, 9999, self.alice.id, {"title": "x"}))

    def test_out_of_range_ids_never_match(self) -> None:
        create_decision(self.db, self.alice.id, "Title", "", "Career")
        for decision_id in (0, -1, MAX_DECISION_ID + 1, 2**70):
            with self.subTest(decision_id=decision_id):
                self.assertIsNone(get_decision(self.db, decision_id))
                self.assertIsNone(update_decision(self.db, decision_id, self.alice.id, {"title": "x"}))
                self.assertIsNone(update_decision(self.db, decision_id, self.alice.id, {}))
                self.assertFalse(delete_decision(self.db, decision_id, self.alice.id))

    def test_delete_requires_owner_match(self) -> None:
        decision_id = create_decision(self.db, self.alice.id, "Title", "", "Career").id
        self.assertFalse(delete_decision(self.db, decision_id, self.bob.id))
        self.assertIsNotNone(get_decision(self.db, decision_id))

        self.assertTrue(delete_decision(self.db, decision_id, self.alice.id))
        self.assertIsNone(get_decision(self.db, decision_id))
        self.assertFalse(delete_decision(self.db, decision_id, self.alice.id))
        self.assertEqual(self.db.query(Decision).count(), 0)


if __name__ == "__main__":
    unittest.main()
