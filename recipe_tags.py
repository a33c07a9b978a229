from typing import Iterable, List, Optional

from constants import TAG_JOINER, TAG_SEPARATOR, WHITESPACE_RE
from recipe_models import RecipeCategory, TagSet


def normalize_tag(tag: str) -> str:
    """Strip every whitespace character and lowercase, so 'Tag    1' becomes 'tag1'."""
    return WHITESPACE_RE.sub("", tag).lower()


def _unique(tags: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(tags))


def normalize_tags(raw: Optional[str]) -> TagSet:
    """Turn a comma separated user string into a TagSet.

    Empty pieces are dropped and duplicates collapse onto their first
    occurrence, so ``"Tag1, Tag2, tag1"`` gives ``("tag1", "tag2")``.
    Lengths are not checked here.
    """
    if raw is None or not raw.strip():
        return TagSet()

    pieces = (normalize_tag(piece) for piece in raw.split(TAG_SEPARATOR))
    return TagSet(tuple(_unique(piece for piece in pieces if piece)))


def format_tags(category: RecipeCategory, tags: TagSet) -> str:
    return TAG_JOINER.join((category.label,) + tags.tags)
