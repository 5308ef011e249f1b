#!/usr/bin/env python3
"""
Cleanup script to empty the storefront collections.

Run:
    python seed/cleanup_store.py \
      --mongodb-uri mongodb://localhost:27017 \
      --database storefront
"""

import argparse
import sys

from aws_lambda_powertools import Logger
from pymongo import MongoClient

logger = Logger(service="cleanup")

COLLECTIONS = ("orders", "users", "products", "counters")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Remove seeded storefront data")

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


def cleanup_store() -> None:
    try:
        args = parse_args()
        db = MongoClient(args.mongodb_uri)[args.database]

        logger.info("Starting cleanup process", extra={"database": args.database})

        for name in COLLECTIONS:
            result = db[name].delete_many({})
            logger.info("Emptied collection", extra={"collection": name, "deleted": result.deleted_count})

        logger.info("Cleanup completed successfully")

    except Exception as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    cleanup_store()
