from datetime import datetime

from bson import ObjectId

from core.infrastructure.mongo.order_store import MongoOrderStore


class TestMongoOrderStore:
    def test_next_order_number_is_sequential(self, mongo_adapter) -> None:
        store = MongoOrderStore(mongo_adapter)

        assert [store.next_order_number() for _ in range(3)] == [1, 2, 3]

    def test_create_returns_expanded_order(self, mongo_db, mongo_adapter, insert_product, insert_customer) -> None:
        product = insert_product("Mug", price=100)
        customer = insert_customer("Alice")

        created = MongoOrderStore(mongo_adapter).create(
            order={
                "orderNumber": 1,
                "status": "new",
                "totalAmount": 100,
                "products": [product["_id"]],
                "customer": customer["_id"],
                "createdAt": datetime(2024, 1, 1),
            }
        )

        assert isinstance(created["_id"], ObjectId)
        assert created["products"][0]["title"] == "Mug"
        assert created["customer"]["name"] == "Alice"
        stored = mongo_db.orders.find_one({"_id": created["_id"]})
        assert stored["products"] == [product["_id"]]
        assert stored["customer"] == customer["_id"]

    def test_fetch_by_number(self, mongo_adapter, insert_product, insert_customer, insert_order) -> None:
        order = insert_order(insert_customer(), [insert_product("Cup")], order_number=42)
        store = MongoOrderStore(mongo_adapter)

        found = store.fetch_by_number(order_number=42)

        assert found["_id"] == order["_id"]
        assert found["products"][0]["title"] == "Cup"
        assert store.fetch_by_number(order_number=43) is None

    def test_fetch_by_ids_keeps_requested_order(
        self, mongo_adapter, insert_product, insert_customer, insert_order
    ) -> None:
        customer, product = insert_customer(), insert_product()
        first, second = insert_order(customer, [product]), insert_order(customer, [product])

        found = MongoOrderStore(mongo_adapter).fetch_by_ids(
            order_ids=[second["_id"], ObjectId(), first["_id"]]
        )

        assert [o["_id"] for o in found] == [second["_id"], first["_id"]]

    def test_fetch_by_ids_empty(self, mongo_adapter) -> None:
        assert MongoOrderStore(mongo_adapter).fetch_by_ids(order_ids=[]) == []

    def test_ids_matching(self, mongo_adapter, insert_product, insert_customer, insert_order) -> None:
        customer, product = insert_customer(), insert_product()
        match = insert_order(customer, [product], address="12 Baker Street")
        insert_order(customer, [product], address="1 Main Street")

        ids = MongoOrderStore(mongo_adapter).ids_matching(filters={"deliveryAddress": "12 Baker Street"})

        assert ids == [match["_id"]]

    def test_update_status(self, mongo_adapter, insert_product, insert_customer, insert_order) -> None:
        insert_order(insert_customer(), [insert_product()], order_number=5)
        store = MongoOrderStore(mongo_adapter)

        updated = store.update_status(order_number=5, status="delivering")

        assert updated["status"] == "delivering"
        assert store.update_status(order_number=6, status="delivering") is None

    def test_delete(self, mongo_db, mongo_adapter, insert_product, insert_customer, insert_order) -> None:
        customer = insert_customer("Alice")
        order = insert_order(customer, [insert_product()])
        store = MongoOrderStore(mongo_adapter)

        deleted = store.delete(order_id=order["_id"])

        assert deleted["customer"]["_id"] == customer["_id"]
        assert mongo_db.orders.count_documents({}) == 0
        assert store.delete(order_id=order["_id"]) is None
