"""Unit tests for the page list calculator."""

import math

import pytest
from themehelper.errors import InvalidArgumentError
from themehelper.models.pagination import ELIDED, PaginationRequest
from themehelper.pagination.calculator import compute_pages, paginate


class TestComputePages:
    def test_first_page_of_twenty(self):
        assert compute_pages(10, 200, 1, 9) == (1, [1, 2, 3, 4, 5, 6, 7, ELIDED, 20])

    def test_near_end(self):
        assert compute_pages(10, 200, 151, 9) == (16, [1, ELIDED, 14, 15, 16, 17, 18, 19, 20])

    def test_last_page(self):
        assert compute_pages(10, 200, 191, 9) == (20, [1, ELIDED, 14, 15, 16, 17, 18, 19, 20])

    def test_middle_window_is_centered(self):
        assert compute_pages(10, 200, 91, 9) == (10, [1, ELIDED, 8, 9, 10, 11, 12, ELIDED, 20])

    def test_first_middle_page(self):
        # page 6 is the first page past the near-start range for max_pages=9
        assert compute_pages(10, 200, 51, 9) == (6, [1, ELIDED, 4, 5, 6, 7, 8, ELIDED, 20])

    def test_even_max_pages_keeps_exact_arithmetic(self):
        current, pages = compute_pages(10, 300, 141, 10)
        assert current == 15
        assert pages == [1, ELIDED, 12, 13, 14, 15, 16, 17, ELIDED, 30]

    def test_no_truncation_when_pages_fit(self):
        assert compute_pages(10, 90, 41, 9) == (5, list(range(1, 10)))

    def test_partial_last_page(self):
        assert compute_pages(25, 51, 1) == (1, [1, 2, 3])

    def test_zero_total(self):
        assert compute_pages(10, 0, 0) == (0, [])

    def test_zero_total_ignores_start(self):
        assert compute_pages(10, 0, 1) == (0, [])

    def test_default_max_pages(self):
        _, pages = compute_pages(1, 100, 50)
        assert len(pages) == 9

    def test_large_max_pages_window_stays_inside_range(self):
        current, pages = compute_pages(1, 30, 25, 15)
        assert current == 25
        assert len(pages) == 15
        assert pages[0] == 1 and pages[-1] == 30
        real = [p for p in pages if p != ELIDED]
        assert real == sorted(set(real))


class TestComputePagesProperties:
    @pytest.mark.parametrize("per_page", [1, 3, 10, 25])
    @pytest.mark.parametrize("total", [1, 9, 10, 57, 200, 1000])
    @pytest.mark.parametrize("max_pages", [5, 7, 9, 10, 12])
    def test_page_list_invariants(self, per_page, total, max_pages):
        total_pages = math.ceil(total / per_page)
        for start in range(1, total + 1, max(1, total // 17)):
            current, pages = compute_pages(per_page, total, start, max_pages)
            assert current == math.ceil(start / per_page)
            if total_pages <= max_pages:
                assert pages == list(range(1, total_pages + 1))
                continue
            assert len(pages) == max_pages
            assert pages[0] == 1
            assert pages[-1] == total_pages
            assert 1 <= pages.count(ELIDED) <= 2
            real = [p for p in pages if p != ELIDED]
            assert all(a < b for a, b in zip(real, real[1:]))


class TestComputePagesValidation:
    @pytest.mark.parametrize("per_page", [0, -5])
    def test_non_positive_per_page(self, per_page):
        with pytest.raises(InvalidArgumentError) as exc:
            compute_pages(per_page, 100, 1)
        assert exc.value.argument == "per_page"
        assert exc.value.code == "INVALID_ARGUMENT"

    def test_negative_total(self):
        with pytest.raises(InvalidArgumentError):
            compute_pages(10, -1, 1)

    def test_negative_start(self):
        with pytest.raises(InvalidArgumentError):
            compute_pages(10, 100, -1)

    def test_max_pages_too_small(self):
        with pytest.raises(InvalidArgumentError) as exc:
            compute_pages(10, 100, 1, 3)
        assert exc.value.argument == "max_pages"


class TestPaginate:
    def test_result_fields(self):
        result = paginate(PaginationRequest(per_page=10, total=200, start=151, max_pages=9))
        assert result.current_page == 16
        assert result.last_page == 20
        assert result.is_truncated

    def test_short_list_not_truncated(self):
        result = paginate(PaginationRequest(per_page=10, total=30, start=11))
        assert result.pages == [1, 2, 3]
        assert result.last_page == 3
        assert not result.is_truncated

    def test_from_params_coerces_strings(self):
        request = PaginationRequest.from_params(per_page="10", total="200", start="1", max_pages=None)
        assert request.per_page == 10
        assert request.max_pages == 9

    def test_from_params_rejects_garbage(self):
        with pytest.raises(InvalidArgumentError) as exc:
            PaginationRequest.from_params(per_page="ten", total=200, start=1)
        assert exc.value.argument == "per_page"
