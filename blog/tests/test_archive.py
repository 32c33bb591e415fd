import unittest

from blog.archive import (
    change_page,
    filter_articles,
    paginate,
    parse_date_timestamp,
    present_archive,
    sort_articles,
)
from blog.models import ArchiveViewState, ArticleSummary, SortOrder


def _article(idx: int, date: str = "2024-01-01", title: str = "", summary: str = "") -> ArticleSummary:
    return ArticleSummary(
        id=f"a{idx}",
        title=title or f"Article {idx}",
        date=date,
        summary=summary,
    )


class FilterTests(unittest.TestCase):
    def test_empty_term_keeps_everything(self):
        articles = [_article(i) for i in range(4)]
        self.assertEqual(filter_articles(articles, ""), articles)

    def test_matches_title_or_summary_case_insensitively(self):
        articles = [
            _article(1, title="Porto in Winter"),
            _article(2, title="Reading list", summary="Notes on PORTO wine"),
            _article(3, title="Index funds", summary="Long-term investing"),
        ]
        result = filter_articles(articles, "porto")
        self.assertEqual([a.id for a in result], ["a1", "a2"])


class SortTests(unittest.TestCase):
    def test_descending_and_ascending(self):
        articles = [
            _article(1, date="2024-01-01"),
            _article(2, date="2024-03-01"),
            _article(3, date="2024-02-01"),
        ]
        desc = sort_articles(articles, SortOrder.DESCENDING)
        self.assertEqual([a.date for a in desc], ["2024-03-01", "2024-02-01", "2024-01-01"])
        asc = sort_articles(articles, SortOrder.ASCENDING)
        self.assertEqual([a.date for a in asc], ["2024-01-01", "2024-02-01", "2024-03-01"])

    def test_ties_keep_input_order_in_both_directions(self):
        articles = [_article(i, date="2024-05-05") for i in range(5)]
        for order in SortOrder:
            self.assertEqual([a.id for a in sort_articles(articles, order)], ["a0", "a1", "a2", "a3", "a4"])

    def test_unparseable_dates_sort_as_epoch(self):
        articles = [
            _article(1, date="not a date"),
            _article(2, date="2024-01-01"),
            _article(3, date=""),
        ]
        desc = sort_articles(articles, SortOrder.DESCENDING)
        self.assertEqual([a.id for a in desc], ["a2", "a1", "a3"])

    def test_parse_date_timestamp(self):
        self.assertEqual(parse_date_timestamp(""), 0.0)
        self.assertEqual(parse_date_timestamp("garbage"), 0.0)
        self.assertEqual(parse_date_timestamp("1970-01-02"), 86400.0)
        self.assertEqual(
            parse_date_timestamp("2024-01-01T09:00:00.000+09:00"),
            parse_date_timestamp("2024-01-01"),
        )


class PaginationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.articles = [_article(i, date=f"2024-01-{i + 1:02d}") for i in range(13)]

    def test_thirteen_items_make_three_pages(self):
        sizes = []
        for page_number in range(1, 5):
            page = present_archive(self.articles, ArchiveViewState(current_page=page_number))
            self.assertEqual(page.total_pages, 3)
            sizes.append(len(page.articles))
        self.assertEqual(sizes, [6, 6, 1, 0])

    def test_page_past_end_is_empty_not_an_error(self):
        page = present_archive(self.articles, ArchiveViewState(current_page=9))
        self.assertTrue(page.is_empty)
        self.assertEqual(page.total_matches, 13)

    def test_no_matches_yield_zero_pages(self):
        page = present_archive(self.articles, ArchiveViewState(search_term="zzz"))
        self.assertEqual(page.total_pages, 0)
        self.assertTrue(page.is_empty)

    def test_first_page_is_newest(self):
        page = present_archive(self.articles, ArchiveViewState())
        self.assertEqual(page.articles[0].id, "a12")
        self.assertFalse(page.has_previous)
        self.assertTrue(page.has_next)
        self.assertEqual(page.page_numbers, [1, 2, 3])

    def test_paginate_clamps_to_bounds(self):
        self.assertEqual(paginate(self.articles, 0), [])
        self.assertEqual(len(paginate(self.articles, 3, page_size=5)), 3)


class ViewStateTests(unittest.TestCase):
    def test_changing_search_resets_page(self):
        state = ArchiveViewState(current_page=3)
        self.assertEqual(state.with_search("lisbon").current_page, 1)

    def test_changing_sort_or_category_resets_page(self):
        state = ArchiveViewState(current_page=3, category="Travel")
        self.assertEqual(state.with_sort(SortOrder.ASCENDING).current_page, 1)
        self.assertEqual(state.with_category("Books").current_page, 1)

    def test_unchanged_values_keep_page(self):
        state = ArchiveViewState(current_page=3, category="Travel")
        self.assertEqual(state.with_search("").current_page, 3)
        self.assertEqual(state.with_category("Travel").current_page, 3)

    def test_from_query_tolerates_junk(self):
        state = ArchiveViewState.from_query({"q": "tea", "sort": "sideways", "page": "-2"}, "Books")
        self.assertEqual(state.search_term, "tea")
        self.assertEqual(state.sort_order, SortOrder.DESCENDING)
        self.assertEqual(state.current_page, 1)
        self.assertEqual(state.category, "Books")

        state = ArchiveViewState.from_query({"sort": "ASC", "page": "2"})
        self.assertEqual(state.sort_order, SortOrder.ASCENDING)
        self.assertEqual(state.current_page, 2)

    def test_change_page_fires_callback_after_update(self):
        seen = []
        state = change_page(ArchiveViewState(), 2, on_change=seen.append)
        self.assertEqual(state.current_page, 2)
        self.assertEqual(seen, [state])


if __name__ == "__main__":
    unittest.main()
