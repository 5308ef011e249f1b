#!/usr/bin/env python3
"""
Seed script to populate a local storefront database.

Run:
    python seed/seed_store.py \
      --mongodb-uri mongodb://localhost:27017 \
      --database storefront
"""

import argparse
import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
from bson import ObjectId
from pymongo import MongoClient, ReturnDocument
from pymongo.database import Database

logger = Logger(service="seed")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed demo products, customers and orders")

    parser.add_argument(
        "--mongodb-uri",
        default="mongodb://localhost:27017",
        help="MongoDB connection string",
    )
    parser.add_argument(
        "--database",
        default="storefront",
        help="Database name",
    )

    return parser.parse_args()


def load_sample_data() -> dict[str, Any]:
    data_file = Path(__file__).parent / "data" / "store.json"
    with open(data_file, encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


def next_order_number(db: Database) -> int:
    counter = db.counters.find_one_and_update(
        {"_id": "orderNumber"},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return int(counter["seq"])


def seed_store() -> None:
    try:
        args = parse_args()
        data = load_sample_data()
        db = MongoClient(args.mongodb_uri)[args.database]

        logger.info("Starting seeding process", extra={"database": args.database})

        now = datetime.now(timezone.utc).replace(tzinfo=None)

        products: dict[str, dict[str, Any]] = {}
        for item in data.get("products", []):
            product = {"_id": ObjectId(), **item}
            db.products.insert_one(product)
            products[item["title"]] = product

        customers: dict[str, dict[str, Any]] = {}
        accounts = [(item, ["customer"]) for item in data.get("customers", [])]
        accounts += [(item, ["admin"]) for item in data.get("admins", [])]
        for item, roles in accounts:
            customer = {
                "_id": ObjectId(),
                **item,
                "roles": roles,
                "createdAt": now - timedelta(days=30),
                "orders": [],
                "orderCount": 0,
                "totalAmount": 0,
                "lastOrder": None,
                "lastOrderDate": None,
            }
            db.users.insert_one(customer)
            customers[item["email"]] = customer
            logger.info("Seeded account", extra={"email": item["email"], "roles": roles})

        for offset, item in enumerate(data.get("orders", [])):
            customer = customers[item["customer"]]
            basket = [products[title] for title in item["items"]]
            total = round(sum(product["price"] for product in basket), 2)
            created_at = now - timedelta(days=len(data["orders"]) - offset)

            order = {
                "_id": ObjectId(),
                "orderNumber": next_order_number(db),
                "status": item.get("status", "new"),
                "totalAmount": total,
                "products": [product["_id"] for product in basket],
                "payment": "card",
                "phone": customer["phone"],
                "email": customer["email"],
                "comment": "",
                "customer": customer["_id"],
                "deliveryAddress": item["address"],
                "createdAt": created_at,
            }
            db.orders.insert_one(order)

            db.users.update_one(
                {"_id": customer["_id"]},
                {
                    "$push": {"orders": order["_id"]},
                    "$inc": {"orderCount": 1, "totalAmount": total},
                    "$set": {"lastOrder": order["_id"], "lastOrderDate": created_at},
                },
            )
            logger.info(
                "Seeded order",
                extra={"order_number": order["orderNumber"], "customer": item["customer"]},
            )

        logger.info(
            "Seeding completed",
            extra={
                "products": len(products),
                "customers": len(customers),
                "orders": db.orders.count_documents({}),
            },
        )

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_store()
