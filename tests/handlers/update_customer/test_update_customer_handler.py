from bson import ObjectId

from handlers.update_customer.handler import handler


class TestUpdateCustomerHandler:
    def test_updates_name_and_phone(self, lambda_context, api_event, body_of, mongo_db, insert_customer) -> None:
        customer = insert_customer("Alice")
        event = api_event(
            method="PATCH",
            path={"id": str(customer["_id"])},
            body={"name": " Alicia ", "phone": "+15550001111"},
        )

        response = handler(event, lambda_context)

        assert response["statusCode"] == 200
        body = body_of(response)
        assert body["name"] == "Alicia"
        assert body["phone"] == "+15550001111"
        assert mongo_db.users.find_one({"_id": customer["_id"]})["name"] == "Alicia"

    def test_other_fields_are_ignored(self, lambda_context, api_event, body_of, mongo_db, insert_customer) -> None:
        customer = insert_customer("Alice")
        event = api_event(
            method="PATCH",
            path={"id": str(customer["_id"])},
            body={"email": "evil@example.com", "roles": ["admin"], "totalAmount": 1e6},
        )

        body = body_of(handler(event, lambda_context))

        stored = mongo_db.users.find_one({"_id": customer["_id"]})
        assert stored["email"] == customer["email"]
        assert stored["roles"] == ["customer"]
        assert body["totalAmount"] == 0

    def test_empty_name_rejected(self, lambda_context, api_event, insert_customer) -> None:
        customer = insert_customer("Alice")
        event = api_event(method="PATCH", path={"id": str(customer["_id"])}, body={"name": "  "})

        assert handler(event, lambda_context)["statusCode"] == 400

    def test_missing_customer(self, lambda_context, api_event, mongo_db) -> None:
        event = api_event(method="PATCH", path={"id": str(ObjectId())}, body={"name": "X"})

        assert handler(event, lambda_context)["statusCode"] == 404

    def test_missing_body(self, lambda_context, api_event, insert_customer) -> None:
        customer = insert_customer("Alice")
        event = api_event(method="PATCH", path={"id": str(customer["_id"])})

        assert handler(event, lambda_context)["statusCode"] == 400
