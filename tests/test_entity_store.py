import unittest
from datetime import datetime
from decimal import Decimal

from pydantic import ValidationError

from helpers import add_user, make_session_factory

from ranchbook.core.errors import Conflict, NotFound, ValidationFailed
from ranchbook.schemas.health_record import HealthRecordCreate
from ranchbook.schemas.livestock import LivestockCreate, LivestockUpdate
from ranchbook.schemas.transaction import TransactionCreate
from ranchbook.services.health_service import create_health_record, list_health_records
from ranchbook.services.livestock_service import (
    create_livestock,
    delete_livestock,
    get_livestock_by_tag_id,
    list_livestock,
    update_livestock,
)
from ranchbook.services.seed_service import reset_ranch_data, seed_sample_data
from ranchbook.services.transaction_service import (
    create_transaction,
    delete_transaction,
    list_transactions,
)


class StoreTestCase(unittest.TestCase):
    def setUp(self):
        self.db = make_session_factory()()
        self.partner = add_user(self.db, "partner")

    def tearDown(self):
        self.db.close()

    def make_animal(self, tag_id="C-100", **extra):
        payload = LivestockCreate(tagId=tag_id, breed="Angus", gender="female", **extra)
        return create_livestock(self.db, payload)


class LivestockStoreTest(StoreTestCase):
    def test_defaults(self):
        animal = self.make_animal()
        self.assertEqual(animal.health_status, "healthy")
        self.assertTrue(animal.is_active)
        self.assertIsNotNone(animal.created_at)

    def test_blank_strings_become_absent(self):
        animal = self.make_animal(location="  ", notes="")
        self.assertIsNone(animal.location)
        self.assertIsNone(animal.notes)

    def test_invalid_enum_rejected(self):
        with self.assertRaises(ValidationError):
            LivestockCreate(tagId="C-1", breed="Angus", gender="other")

    def test_duplicate_tag_rejected_even_when_inactive(self):
        animal = self.make_animal()
        delete_livestock(self.db, animal.id)
        with self.assertRaises(Conflict):
            self.make_animal()

    def test_partial_update_three_states(self):
        animal = self.make_animal(notes="calm", location="Pasture A")

        changes = LivestockUpdate.model_validate({"notes": None, "weight": "1010.50"}).changes()
        updated = update_livestock(self.db, animal.id, changes)

        self.assertIsNone(updated.notes)
        self.assertEqual(updated.location, "Pasture A")
        self.assertEqual(updated.breed, "Angus")
        self.assertEqual(updated.weight, Decimal("1010.50"))

    def test_required_field_cannot_be_cleared(self):
        with self.assertRaises(ValidationFailed) as ctx:
            LivestockUpdate.model_validate({"breed": "", "tagId": None}).changes()
        self.assertEqual(ctx.exception.error, "breed, tagId")

    def test_soft_delete_is_idempotent(self):
        animal = self.make_animal()
        delete_livestock(self.db, animal.id)
        again = delete_livestock(self.db, animal.id)

        self.assertFalse(again.is_active)
        self.assertEqual(list_livestock(self.db), [])
        self.assertEqual(len(list_livestock(self.db, include_inactive=True)), 1)
        self.assertIsNotNone(get_livestock_by_tag_id(self.db, "C-100"))

    def test_update_missing(self):
        with self.assertRaises(NotFound):
            update_livestock(self.db, 999, {"notes": "x"})


class TransactionStoreTest(StoreTestCase):
    def make_transaction(self, amount="100.00", when=datetime(2026, 10, 1), **extra):
        payload = TransactionCreate(
            type="income",
            category="livestock_sales",
            description="Sale",
            amount=amount,
            date=when,
            **extra,
        )
        return create_transaction(self.db, payload, self.partner)

    def test_partner_defaults_to_actor(self):
        transaction = self.make_transaction()
        self.assertEqual(transaction.partner_id, "partner")

    def test_unknown_references_rejected(self):
        with self.assertRaises(ValidationFailed):
            self.make_transaction(livestockId=404)
        with self.assertRaises(ValidationFailed):
            self.make_transaction(partnerId="ghost")

    def test_negative_amount_rejected(self):
        with self.assertRaises(ValidationError):
            TransactionCreate(type="expense", category="feed", description="x", amount="-1", date=datetime(2026, 1, 1))

    def test_listing_order_and_range(self):
        first = self.make_transaction(when=datetime(2026, 9, 1))
        second = self.make_transaction(when=datetime(2026, 10, 1))
        third = self.make_transaction(when=datetime(2026, 10, 1))

        ids = [tx.id for tx in list_transactions(self.db)]
        self.assertEqual(ids, [third.id, second.id, first.id])

        ranged = list_transactions(self.db, start=datetime(2026, 9, 15), end=datetime(2026, 10, 1))
        self.assertEqual([tx.id for tx in ranged], [third.id, second.id])

    def test_hard_delete(self):
        transaction = self.make_transaction()
        delete_transaction(self.db, transaction.id)
        self.assertEqual(list_transactions(self.db), [])
        with self.assertRaises(NotFound):
            delete_transaction(self.db, transaction.id)


class HealthRecordStoreTest(StoreTestCase):
    def test_filter_by_animal(self):
        first = self.make_animal("C-1")
        second = self.make_animal("C-2")
        for animal in (first, second):
            create_health_record(
                self.db,
                HealthRecordCreate(
                    livestockId=animal.id,
                    recordType="vaccination",
                    description="Annual shots",
                    date=datetime(2026, 10, 1),
                ),
            )

        self.assertEqual(len(list_health_records(self.db)), 2)
        records = list_health_records(self.db, livestock_id=second.id)
        self.assertEqual([record.livestock_id for record in records], [second.id])

    def test_unknown_animal(self):
        with self.assertRaises(ValidationFailed):
            create_health_record(
                self.db,
                HealthRecordCreate(
                    livestockId=77,
                    recordType="checkup",
                    description="Lameness",
                    date=datetime(2026, 10, 1),
                ),
            )


class SeedTest(StoreTestCase):
    def test_seed_once(self):
        self.assertTrue(seed_sample_data(self.db))
        self.assertFalse(seed_sample_data(self.db))
        self.assertEqual(len(list_livestock(self.db)), 3)
        self.assertEqual(len(list_transactions(self.db)), 3)

        reset_ranch_data(self.db)
        self.assertTrue(seed_sample_data(self.db))


if __name__ == "__main__":
    unittest.main()
