from datetime import datetime

import pytest
from pydantic import ValidationError as PydanticValidationError
from pydantic import field_validator

from core.models.errors import ValidationError
from core.models.listing import ListingRequest, parse_date_from, parse_date_to, parse_number


class TestListingRequest:
    def test_defaults(self) -> None:
        request = ListingRequest.model_validate({})

        assert request.page == 1
        assert request.limit == 10
        assert request.sort_field == "createdAt"
        assert request.sort_order == "desc"
        assert request.search is None

    def test_pagination_is_normalized_never_rejected(self) -> None:
        request = ListingRequest.model_validate({"page": "abc", "limit": "500"})

        assert request.page == 1
        assert request.limit == 10

    def test_camel_case_sort_parameters(self) -> None:
        request = ListingRequest.model_validate({"sortField": "createdAt", "sortOrder": "asc"})

        assert request.sort.order == "asc"

    def test_unknown_sort_field_defaults(self) -> None:
        request = ListingRequest.model_validate({"sortField": "password"})

        assert request.sort_field == "createdAt"

    def test_unsafe_search_raises_domain_error(self) -> None:
        with pytest.raises(ValidationError):
            ListingRequest.model_validate({"search": ".*"})

    def test_blank_search_is_absent(self) -> None:
        assert ListingRequest.model_validate({"search": "  "}).search is None


class TestParsers:
    def test_date_from(self) -> None:
        assert parse_date_from("2024-03-05") == datetime(2024, 3, 5)

    def test_date_to_is_end_of_day(self) -> None:
        assert parse_date_to("2024-03-05") == datetime(2024, 3, 5, 23, 59, 59, 999000)

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_blank_is_absent(self, value) -> None:
        assert parse_date_from(value) is None
        assert parse_date_to(value) is None
        assert parse_number(value) is None

    @pytest.mark.parametrize("value", ["05/03/2024", "yesterday", ["2024-01-01"]])
    def test_malformed_date_rejected(self, value) -> None:
        with pytest.raises(ValueError):
            parse_date_from(value)

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity", ["1"], {"$gt": 1}])
    def test_malformed_number_rejected(self, value) -> None:
        with pytest.raises(ValueError):
            parse_number(value)

    def test_number(self) -> None:
        assert parse_number("500") == 500.0
        assert parse_number(" 12.5 ") == 12.5


class ExampleRequest(ListingRequest):
    amount_from: float | None = None

    @field_validator("amount_from", mode="before")
    @classmethod
    def validate_amount(cls, value):
        return parse_number(value)


def test_malformed_filter_is_reported_by_pydantic() -> None:
    with pytest.raises(PydanticValidationError):
        ExampleRequest.model_validate({"amountFrom": "lots"})
