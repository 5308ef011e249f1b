import pytest

from handlers.update_order.handler import handler


class TestUpdateOrderHandler:
    def test_sets_status(
        self, lambda_context, api_event, body_of, mongo_db, insert_product, insert_customer, insert_order
    ) -> None:
        order = insert_order(insert_customer(), [insert_product()], order_number=3)

        response = handler(
            api_event(method="PATCH", path={"orderNumber": "3"}, body={"status": "delivering"}),
            lambda_context,
        )

        assert response["statusCode"] == 200
        assert body_of(response)["status"] == "delivering"
        assert mongo_db.orders.find_one({"_id": order["_id"]})["status"] == "delivering"

    @pytest.mark.parametrize("body", [{"status": "shipped"}, {"status": ""}, {}, {"status": 1}])
    def test_invalid_status(
        self, lambda_context, api_event, mongo_db, insert_product, insert_customer, insert_order, body
    ) -> None:
        order = insert_order(insert_customer(), [insert_product()], order_number=3)

        response = handler(api_event(method="PATCH", path={"orderNumber": "3"}, body=body), lambda_context)

        assert response["statusCode"] == 400
        assert mongo_db.orders.find_one({"_id": order["_id"]})["status"] == "new"

    def test_missing_order(self, lambda_context, api_event, mongo_db) -> None:
        event = api_event(method="PATCH", path={"orderNumber": "3"}, body={"status": "completed"})

        assert handler(event, lambda_context)["statusCode"] == 404

    def test_requires_admin(self, lambda_context, api_event, insert_customer) -> None:
        customer = insert_customer()
        event = api_event(
            method="PATCH",
            user_id=customer["_id"],
            roles="customer",
            path={"orderNumber": "3"},
            body={"status": "completed"},
        )

        assert handler(event, lambda_context)["statusCode"] == 403
