"""Tests for the paginated catalog reads."""

import math

import pytest
from sqlalchemy.exc import OperationalError

from app.domain.exceptions import NotFoundError, UpstreamError
from app.services.catalog_service import CatalogService, parse_page


class TestParsePage:

    @pytest.mark.parametrize("raw", [None, "", "abc", "0", "-3", "1.5"])
    def test_invalid_values_fall_back_to_first_page(self, raw):
        assert parse_page(raw) == 1

    def test_numeric_string(self):
        assert parse_page("4") == 4


class TestListProducts:

    @pytest.mark.parametrize(
        "total, page",
        [(0, 1), (1, 1), (5, 1), (5, 2), (5, 3), (5, 4), (6, 3)],
    )
    def test_slice_and_metadata(self, db, make_product, total, page):
        for n in range(total):
            make_product(title=f"P{n}")
        size = 2

        result = CatalogService(db, page_size=size).list_products(str(page))

        assert len(result["products"]) == min(size, max(0, total - (page - 1) * size))
        assert result["total_products"] == total
        assert result["current_page"] == page
        assert result["has_next_page"] == (page * size < total)
        assert result["has_previous_page"] == (page > 1)
        assert result["last_page"] == math.ceil(total / size)
        assert result["next_page"] == page + 1
        assert result["previous_page"] == page - 1

    def test_pages_follow_insertion_order(self, db, make_product):
        titles = [make_product(title=t).title for t in ("A", "B", "C")]
        svc = CatalogService(db, page_size=2)

        first = [p.title for p in svc.list_products(1)["products"]]
        second = [p.title for p in svc.list_products(2)["products"]]

        assert first + second == titles

    def test_missing_page_means_first(self, db, make_product):
        make_product(title="Only")
        result = CatalogService(db, page_size=1).list_products(None)
        assert result["current_page"] == 1
        assert [p.title for p in result["products"]] == ["Only"]

    def test_store_failure_is_wrapped(self, db, monkeypatch):
        svc = CatalogService(db, page_size=1)

        def boom():
            raise OperationalError("SELECT", {}, Exception("db down"))

        monkeypatch.setattr(svc.repo, "count_products", boom)
        with pytest.raises(UpstreamError) as exc:
            svc.list_products(1)
        assert exc.value.status_code == 500

    def test_page_size_must_be_positive(self, db):
        with pytest.raises(ValueError):
            CatalogService(db, page_size=0)


class TestGetProduct:

    def test_returns_product(self, db, make_product):
        product = make_product(title="Lamp", price="12.50")
        found = CatalogService(db, page_size=1).get_product(product.id)
        assert found.title == "Lamp"

    def test_missing_product_raises_not_found(self, db):
        with pytest.raises(NotFoundError):
            CatalogService(db, page_size=1).get_product(999)


class TestPagesPastTheEnd:

    def test_huge_page_returns_empty_slice(self, db, make_product, monkeypatch):
        make_product(title="A")
        svc = CatalogService(db, page_size=2)

        def no_query(offset, limit):
            raise AssertionError("slice query issued past the last page")

        monkeypatch.setattr(svc.repo, "list_products", no_query)
        result = svc.list_products("99999999999999999999")

        assert result["products"] == []
        assert result["current_page"] == 99999999999999999999
        assert result["has_next_page"] is False
        assert result["has_previous_page"] is True
        assert result["last_page"] == 1
