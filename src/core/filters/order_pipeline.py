"""
Aggregation pipeline for the admin order listing.

Orders are joined to their products and customer, flattened to one row per
(order, product) pair so product titles can be searched, and regrouped to
one row per order. Sorting and skip/limit run after the regrouping, so a
page always holds distinct orders and lines up with the total produced by
``count_pipeline``.
"""

from typing import Any

from core.filters.criteria import OrderFilterCriteria, build_order_filter
from core.filters.page_pagination import PagePagination
from core.filters.search import SearchTerm
from core.filters.sorting import SortSpec
from core.utils.constants import CUSTOMERS_COLLECTION, PRODUCTS_COLLECTION

Stage = dict[str, Any]

# Scalar order fields carried through the regrouping stage.
ORDER_FIELDS: tuple[str, ...] = (
    "orderNumber",
    "status",
    "totalAmount",
    "deliveryAddress",
    "payment",
    "phone",
    "email",
    "comment",
    "customer",
    "createdAt",
)


class OrderAggregationPipeline:
    """Builds the stages for one order listing request."""

    def __init__(self, criteria: OrderFilterCriteria) -> None:
        self.criteria = criteria

    def _search_stage(self) -> Stage | None:
        if not self.criteria.search:
            return None

        clauses: list[dict[str, Any]] = [
            {"products.title": SearchTerm.pattern(self.criteria.search)}
        ]

        number = SearchTerm.as_number(self.criteria.search)
        if number is not None:
            clauses.append({"orderNumber": number})

        return {"$match": {"$or": clauses}}

    def _joined_rows(self) -> list[Stage]:
        """Stages up to and including the optional search match."""
        stages: list[Stage] = [
            {"$match": build_order_filter(self.criteria)},
            {
                "$lookup": {
                    "from": PRODUCTS_COLLECTION,
                    "localField": "products",
                    "foreignField": "_id",
                    "as": "products",
                }
            },
            {
                "$lookup": {
                    "from": CUSTOMERS_COLLECTION,
                    "localField": "customer",
                    "foreignField": "_id",
                    "as": "customer",
                }
            },
            {"$unwind": "$customer"},
            {"$unwind": "$products"},
        ]

        search_stage = self._search_stage()
        if search_stage is not None:
            stages.append(search_stage)

        return stages

    @staticmethod
    def _group_stage() -> Stage:
        group: dict[str, Any] = {"_id": "$_id"}
        for field in ORDER_FIELDS:
            group[field] = {"$first": f"${field}"}
        group["products"] = {"$push": "$products"}
        return {"$group": group}

    def page_pipeline(self, sort: SortSpec, page: int, page_size: int) -> list[Stage]:
        """Stages returning one page of distinct, fully joined orders."""
        return [
            *self._joined_rows(),
            self._group_stage(),
            sort.to_stage(),
            {"$skip": PagePagination.skip(page, page_size)},
            {"$limit": page_size},
        ]

    def count_pipeline(self) -> list[Stage]:
        """Stages counting the distinct orders ``page_pipeline`` pages over."""
        return [
            *self._joined_rows(),
            {"$group": {"_id": "$_id"}},
            {"$group": {"_id": None, "total": {"$sum": 1}}},
        ]
