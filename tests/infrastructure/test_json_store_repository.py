"""Tests for the JSON-file store repository (real files under tmp_path)."""

import json
from decimal import Decimal

import pytest

from ims.domain.exceptions import PersistenceError
from ims.domain.model.store import InventoryStore
from ims.domain.model.value_objects import Money
from ims.infrastructure.persistence.json_store_repository import JsonStoreRepository
from tests.fakes import logged_in


def _populated_store() -> InventoryStore:
    store = InventoryStore()
    session = logged_in()
    store.record_purchase(session, "Widget", 10, Money.of("2.00"))
    store.add_product(session, "Gadget", "Shiny", Money.of("9.99"), 3)
    store.record_sale(session, "Widget", 4, Money.of("1.50"))
    return store


class TestLoadEmpty:

    def test_missing_directory_gives_empty_store(self, tmp_path):
        store = JsonStoreRepository(tmp_path / "nope").load()
        assert store == InventoryStore()

    def test_corrupt_file_only_empties_that_collection(self, tmp_path):
        repo = JsonStoreRepository(tmp_path)
        repo.save(_populated_store())
        (tmp_path / "sales.json").write_text("{not json", encoding="utf-8")

        store = repo.load()

        assert store.sales == []
        assert set(store.products) == {"Widget", "Gadget"}
        assert len(store.purchases) == 1

    def test_wrong_shape_is_ignored(self, tmp_path):
        (tmp_path / "inventory.json").write_text("[]", encoding="utf-8")
        assert JsonStoreRepository(tmp_path).load().products == {}

    def test_malformed_record_is_ignored(self, tmp_path):
        (tmp_path / "purchases.json").write_text(
            json.dumps([{"product_name": "Widget", "quantity": -2, "purchase_price": "1"}]),
            encoding="utf-8",
        )
        assert JsonStoreRepository(tmp_path).load().purchases == []

    def test_product_is_keyed_by_mapping_key(self, tmp_path):
        (tmp_path / "inventory.json").write_text(
            json.dumps(
                {
                    "Widget": {
                        "name": "Gadget",
                        "description": "Blue",
                        "price": "2.20",
                        "quantity": 6,
                    }
                }
            ),
            encoding="utf-8",
        )

        store = JsonStoreRepository(tmp_path).load()

        assert set(store.products) == {"Widget"}
        assert store.get("Widget").name == "Widget"


class TestSaveAndLoad:

    def test_writes_three_documents(self, tmp_path):
        JsonStoreRepository(tmp_path).save(_populated_store())

        inventory = json.loads((tmp_path / "inventory.json").read_text())
        sales = json.loads((tmp_path / "sales.json").read_text())
        purchases = json.loads((tmp_path / "purchases.json").read_text())

        assert inventory["Widget"]["quantity"] == 6
        assert Decimal(inventory["Widget"]["price"]) == Decimal("2.20")
        assert inventory["Gadget"]["total_purchased_qty"] == 0
        assert sales[0]["product_name"] == "Widget"
        assert Decimal(sales[0]["profit"]) == Decimal("-2.00")
        assert purchases == [
            {"product_name": "Widget", "quantity": 10, "purchase_price": "2.00"}
        ]

    def test_state_survives_a_restart(self, tmp_path):
        original = _populated_store()
        JsonStoreRepository(tmp_path).save(original)

        assert JsonStoreRepository(tmp_path).load() == original

    def test_save_overwrites_previous_state(self, tmp_path):
        repo = JsonStoreRepository(tmp_path)
        repo.save(_populated_store())
        repo.save(InventoryStore())

        assert repo.load() == InventoryStore()

    def test_reads_numeric_amounts(self, tmp_path):
        (tmp_path / "inventory.json").write_text(
            json.dumps(
                {
                    "Widget": {
                        "name": "Widget",
                        "description": "No description",
                        "price": 2.2,
                        "quantity": 6,
                        "total_cost": 20.0,
                        "total_purchased_qty": 10,
                    }
                }
            ),
            encoding="utf-8",
        )
        (tmp_path / "sales.json").write_text(
            json.dumps(
                [{"product_name": "Widget", "quantity": 4, "sale_price": 5.0, "profit": 12.0}]
            ),
            encoding="utf-8",
        )

        store = JsonStoreRepository(tmp_path).load()

        assert store.get("Widget").price == Money.of("2.2")
        assert store.get("Widget").average_cost == Money.of("2")
        assert store.sales[0].profit == Decimal("12")


class TestSaveFailure:

    def test_unwritable_location_raises_persistence_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")

        with pytest.raises(PersistenceError):
            JsonStoreRepository(blocker / "data").save(_populated_store())
