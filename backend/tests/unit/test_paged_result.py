"""
PagedResult 分页计算测试
"""
import pytest
from hypothesis import given, strategies as st

from apps.core.interfaces import PagedResult


@pytest.mark.parametrize("total,page,size,pages,has_next,has_prev", [
    (0, 1, 10, 0, False, False),
    (1, 1, 10, 1, False, False),
    (10, 1, 10, 1, False, False),
    (11, 1, 10, 2, True, False),
    (30, 2, 10, 3, True, True),
    (30, 3, 10, 3, False, True),
])
def test_create_computes_paging(total, page, size, pages, has_next, has_prev):
    result = PagedResult.create([], total, page, size)

    assert result.total_pages == pages
    assert result.has_next_page is has_next
    assert result.has_previous_page is has_prev
    assert result.current_page == page
    assert result.page_size == size
    assert result.total_count == total


def test_page_beyond_last_has_no_next():
    result = PagedResult.create([], 5, 4, 2)

    assert result.total_pages == 3
    assert result.has_next_page is False
    assert result.has_previous_page is True


@given(
    total=st.integers(min_value=0, max_value=100_000),
    page=st.integers(min_value=1, max_value=1_000),
    size=st.integers(min_value=1, max_value=500),
)
def test_total_pages_covers_all_items(total, page, size):
    result = PagedResult.create([], total, page, size)

    assert (result.total_pages - 1) * size < total or total == 0
    assert result.total_pages * size >= total
    assert result.has_next_page == (page < result.total_pages)
    assert result.has_previous_page == (page > 1)
