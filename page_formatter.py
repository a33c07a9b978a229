"""Packs many short rows into code-block pages that fit a message size limit."""

from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from constants import (
    CODE_FENCE,
    NO_RECIPES_MESSAGE,
    NO_RECIPES_WITH_CATEGORY_MESSAGE,
    NO_RECIPES_WITH_TAG_MESSAGE,
    NO_TAGS_MESSAGE,
)
from recipe_models import RecipeCategory, RecipeEntry, TagEntry
from recipe_tags import normalize_tag

T = TypeVar("T")

RECIPE_ENTRY_HEADER = f"{'Id':<3} {'Title':<50} {'Author':<50} "
TAG_ENTRY_HEADER = f"{'Id':<3} {'Tag':<50} "


def wrap_code_block(text: str) -> str:
    return f"{CODE_FENCE}\n{text}\n{CODE_FENCE}"


WRAP_OVERHEAD = len(wrap_code_block(""))


def _max_message_length(limit_provider) -> int:
    limit = getattr(limit_provider, "max_message_length", None)
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError("limit_provider must expose a positive max_message_length")
    return limit


def _require_text(value: Optional[str], name: str) -> None:
    if value is None or not value.strip():
        raise ValueError(f"{name} cannot be empty or consist of whitespaces only")


class PageFormatter(Generic[T]):
    """Formats rows below a repeated header into pages.

    Every page is wrapped in a code block and, unless a single row is
    longer than the limit on its own, stays within
    ``limit_provider.max_message_length`` including the wrapping. Rows
    keep their order and are never split or truncated.

    A row is measured with its trailing newline, so a limit taken from a
    formatter that compares only ``buffer + row`` may seal one row sooner
    here. When a row does not fit, the current buffer is sealed even if it
    holds only the header.
    """

    def __init__(self, limit_provider, header: str, render: Callable[[T], str]):
        _max_message_length(limit_provider)
        _require_text(header, "header")
        if not callable(render):
            raise TypeError("render must be callable")

        self.limit_provider = limit_provider
        self.header = header
        self.render = render

    def create_pages(self, rows: Iterable[T], empty_message: str) -> List[str]:
        if rows is None:
            raise ValueError("rows is required")
        _require_text(empty_message, "empty_message")

        limit = _max_message_length(self.limit_provider)
        seed = f"{self.header}\n"

        pages: List[str] = []
        buffer = seed
        has_rows = False
        for row in rows:
            line = f"{self.render(row)}\n"
            if len(buffer) + len(line) + WRAP_OVERHEAD > limit:
                pages.append(wrap_code_block(buffer))
                buffer = seed
            buffer += line
            has_rows = True

        if not has_rows:
            return [empty_message]

        pages.append(wrap_code_block(buffer))
        return pages


def paginate(
    header: str,
    empty_message: str,
    rows: Iterable[T],
    render: Callable[[T], str],
    limit_provider
) -> List[str]:
    return PageFormatter(limit_provider, header, render).create_pages(rows, empty_message)


def format_recipe_entry(entry: RecipeEntry) -> str:
    return f"{entry.id:<3} {entry.title:<50} {entry.author_name:<50}"


def format_tag_entry(entry: TagEntry) -> str:
    return f"{entry.id:<3} {entry.tag:<50}"


def create_recipe_entry_pages(
    entries: Iterable[RecipeEntry],
    limit_provider,
    category: Optional[RecipeCategory] = None,
    tag: Optional[str] = None
) -> List[str]:
    """List recipe entries, optionally only those of a category or carrying a tag.

    Entry tags are normalized before comparing, the same way as ``tag``.
    """
    empty_message = NO_RECIPES_MESSAGE
    selected: Iterable[RecipeEntry] = entries
    if category is not None:
        selected = [e for e in selected if e.category == category]
        empty_message = NO_RECIPES_WITH_CATEGORY_MESSAGE
    if tag is not None:
        wanted = normalize_tag(tag)
        selected = [e for e in selected if wanted in {normalize_tag(t) for t in e.tags}]
        empty_message = NO_RECIPES_WITH_TAG_MESSAGE.format(tag=tag)

    formatter = PageFormatter(limit_provider, RECIPE_ENTRY_HEADER, format_recipe_entry)
    return formatter.create_pages(selected, empty_message)


def create_tag_entry_pages(entries: Iterable[TagEntry], limit_provider) -> List[str]:
    formatter = PageFormatter(limit_provider, TAG_ENTRY_HEADER, format_tag_entry)
    return formatter.create_pages(entries, NO_TAGS_MESSAGE)
