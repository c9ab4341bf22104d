"""Utility functions for ecs-remote."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Literal, TypeVar

from rich.console import Console
from rich.logging import RichHandler
from rich.spinner import Spinner

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient

T = TypeVar("T")

Page = Mapping[str, Any]
PageRequest = Callable[[str | None], Page]
ListOperation = Literal["list_clusters", "list_services", "list_tasks"]

NEXT_TOKEN_KEY = "nextToken"

console = Console()
logger = logging.getLogger(__name__)


def extract_name_from_arn(arn: str) -> str:
    """Extract resource name from AWS ARN, falling back to the whole ARN."""
    return arn.split("/")[-1] or arn


def print_success(message: str) -> None:
    console.print(f"✅ {message}", style="green")


def print_info(message: str) -> None:
    console.print(message, style="blue")


@contextmanager
def show_spinner() -> Iterator[None]:
    """Context manager that shows a spinner while running operations."""
    spinner = Spinner("dots", style="cyan")
    with console.status(spinner):
        yield


def configure_logging(debug: bool = False) -> None:
    """Send diagnostic logging to stderr through rich."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    logging.getLogger("ecs_remote").setLevel(logging.DEBUG if debug else logging.WARNING)


def iter_pages(request: PageRequest) -> Iterator[Page]:
    """Yield every page of a token-paginated listing, in the order returned.

    ``request`` is called with ``None`` first and then with the ``nextToken``
    of the previous response. Iteration stops at the first response without
    a token. Errors raised by ``request`` propagate to the caller.
    """
    token: str | None = None
    page_count = 0
    while True:
        page = request(token)
        page_count += 1
        yield page

        token = page.get(NEXT_TOKEN_KEY)
        if not token:
            logger.debug("Listing exhausted after %d page(s)", page_count)
            return


def collect_pages(request: PageRequest, extract: Callable[[Page], list[T] | None]) -> list[T]:
    """Concatenate the items of every page into a single list."""
    items: list[T] = []
    for page in iter_pages(request):
        items.extend(extract(page) or [])
    return items


def _bind_operation(client: ECSClient, operation_name: ListOperation, **kwargs: str) -> PageRequest:
    operation = getattr(client, operation_name)

    def request(token: str | None) -> Page:
        if token:
            return operation(**kwargs, nextToken=token)
        return operation(**kwargs)

    return request


def iter_aws_pages(client: ECSClient, operation_name: ListOperation, **kwargs: str) -> Iterator[Page]:
    return iter_pages(_bind_operation(client, operation_name, **kwargs))


def paginate_aws_list(
    client: ECSClient,
    operation_name: ListOperation,
    result_key: str,
    **kwargs: str,
) -> list[str]:
    return collect_pages(_bind_operation(client, operation_name, **kwargs), lambda page: page.get(result_key))
