"""Tests for core navigation functions."""

from unittest.mock import patch

import pytest
import questionary

from ecs_remote.core.errors import SelectionAbortedError
from ecs_remote.core.navigation import (
    EXIT_VALUE,
    add_exit_choice_with_shortcut,
    get_questionary_style,
    select_index,
    select_with_auto_pagination,
    select_with_navigation,
    select_with_pagination,
)


def test_get_questionary_style():
    style = get_questionary_style()
    assert style is not None


def test_add_exit_choice_with_shortcut():
    choices = [{"name": "Option 1", "value": "opt1"}]
    result = add_exit_choice_with_shortcut(choices)

    assert len(result) == 2
    assert all(isinstance(choice, questionary.Choice) for choice in result)
    assert result[0].value == "opt1"
    assert result[1].value == EXIT_VALUE
    assert result[1].shortcut_key == "q"


@patch("ecs_remote.core.navigation.questionary.select")
def test_select_with_navigation_uses_shortcuts(mock_select):
    mock_select.return_value.ask.return_value = "opt1"

    choices = [{"name": "Option 1", "value": "opt1"}]
    result = select_with_navigation("Test prompt", choices)

    assert result == "opt1"
    call_kwargs = mock_select.call_args[1]
    assert call_kwargs["use_shortcuts"] is True
    assert [choice.value for choice in call_kwargs["choices"]] == ["opt1", EXIT_VALUE]


@patch("ecs_remote.core.navigation.questionary.select")
def test_select_with_pagination_single_page(mock_select):
    mock_select.return_value.ask.return_value = "item-5"

    choices = [{"name": f"Item {i}", "value": f"item-{i}"} for i in range(20)]
    result = select_with_pagination("Select item:", choices, page_size=25)

    assert result == "item-5"
    mock_select.assert_called_once()
    assert mock_select.call_args[1]["use_shortcuts"] is False


@patch("ecs_remote.core.navigation.questionary.select")
def test_select_with_pagination_navigation_between_pages(mock_select):
    mock_select.return_value.ask.side_effect = ["pagination:next", "pagination:previous", "pagination:next", "item-35"]

    choices = [{"name": f"Item {i}", "value": f"item-{i}"} for i in range(50)]
    result = select_with_pagination("Select item:", choices, page_size=25)

    assert result == "item-35"
    assert mock_select.call_count == 4
    assert mock_select.call_args[0][0] == "Select item: (Page 2 of 2)"


@patch("ecs_remote.core.navigation.select_with_pagination")
@patch("ecs_remote.core.navigation.select_with_navigation")
def test_select_with_auto_pagination_picks_by_size(mock_navigation, mock_pagination):
    small = [{"name": f"Item {i}", "value": str(i)} for i in range(30)]
    large = [{"name": f"Item {i}", "value": str(i)} for i in range(31)]

    select_with_auto_pagination("Prompt", small)
    select_with_auto_pagination("Prompt", large)

    mock_navigation.assert_called_once_with("Prompt", small)
    mock_pagination.assert_called_once_with("Prompt", large)


@patch("ecs_remote.core.navigation.select_with_auto_pagination")
def test_select_index_returns_chosen_position(mock_select):
    mock_select.return_value = "2"

    result = select_index("Select Service", ["api", "web", "worker"])

    assert result == 2
    choices = mock_select.call_args[0][1]
    assert choices == [
        {"name": "api", "value": "0"},
        {"name": "web", "value": "1"},
        {"name": "worker", "value": "2"},
    ]


@patch("ecs_remote.core.navigation.select_with_auto_pagination")
def test_select_index_raises_when_prompt_cancelled(mock_select):
    mock_select.return_value = None

    with pytest.raises(SelectionAbortedError):
        select_index("Select Cluster", ["prod"])


@patch("ecs_remote.core.navigation.select_with_auto_pagination")
def test_select_index_raises_when_exit_chosen(mock_select):
    mock_select.return_value = EXIT_VALUE

    with pytest.raises(SelectionAbortedError):
        select_index("Select Cluster", ["prod"])


def test_select_index_rejects_empty_labels():
    with pytest.raises(ValueError):
        select_index("Select Cluster", [])
