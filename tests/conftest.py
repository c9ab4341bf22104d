"""Shared pytest fixtures for tests."""

from unittest.mock import Mock

import pytest


@pytest.fixture
def token_pages():
    """Build listing responses chained by nextToken, the last one without a token."""

    def _create_pages(result_key: str, items_per_page: list[list[str]]) -> list[dict]:
        pages = []
        for index, items in enumerate(items_per_page):
            page = {result_key: items}
            if index < len(items_per_page) - 1:
                page["nextToken"] = f"token-{index + 1}"
            pages.append(page)
        return pages

    return _create_pages


@pytest.fixture
def mock_ecs_client():
    return Mock()
