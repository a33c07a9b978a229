from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from constants import CATEGORY_COLORS, CATEGORY_LABELS, TAG_JOINER, TAG_SEPARATOR, WHITESPACE_RE


class RecipeCategory(Enum):
    """Closed set of recipe classifications."""

    MEAT = "meat"
    FISH = "fish"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    DRINKS = "drinks"
    PASTRY = "pastry"
    DESSERT = "dessert"
    SNACK = "snack"
    OTHER = "other"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self.name]

    @property
    def color(self) -> Tuple[int, int, int]:
        return CATEGORY_COLORS[self.name]


class FailureKind(Enum):
    INVALID_FIELD = "InvalidField"
    FIELD_TOO_LONG = "FieldTooLong"
    TAGS_TOO_LONG = "TagsTooLong"
    RECIPE_TOO_LONG = "RecipeTooLong"
    INVALID_URL = "InvalidUrl"
    INVALID_CATEGORY = "InvalidCategory"


@dataclass(frozen=True)
class ValidationFailure:
    """A user-facing reason why a recipe could not be built."""

    kind: FailureKind
    message: str
    subject: str
    limit: Optional[int] = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class LimitPolicy:
    """Character ceilings for every part of a recipe and for listing pages."""

    max_author_name: int
    max_field_name: int
    max_field_data: int
    max_title: int
    max_recipe_tags_length: int
    max_recipe_length: int
    max_message_length: int

    def __post_init__(self):
        for name, value in self.__dict__.items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class AuthorRecord:
    name: str
    image_url: str

    @property
    def total_length(self) -> int:
        return len(self.name)


@dataclass(frozen=True)
class FieldRecord:
    name: str
    data: str

    @property
    def total_length(self) -> int:
        return len(self.name) + len(self.data)


@dataclass(frozen=True)
class TagSet:
    """Ordered, duplicate-free normalized tags."""

    tags: Tuple[str, ...] = ()

    def __post_init__(self):
        seen = set()
        for tag in self.tags:
            if not tag or TAG_SEPARATOR in tag or WHITESPACE_RE.search(tag) or tag != tag.lower():
                raise ValueError(f"'{tag}' is not a normalized tag")
            if tag in seen:
                raise ValueError(f"Duplicate tag '{tag}'")
            seen.add(tag)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    def __str__(self) -> str:
        return TAG_JOINER.join(self.tags)

    @property
    def total_length(self) -> int:
        return len(str(self))


@dataclass(frozen=True)
class RecipeDocument:
    """A fully validated recipe; built once by RecipeAssembler."""

    author: AuthorRecord
    title: str
    fields: Tuple[FieldRecord, ...]
    category: RecipeCategory
    tags: TagSet = field(default_factory=TagSet)
    image_url: Optional[str] = None

    @property
    def total_length(self) -> int:
        return len(self.title) + self.author.total_length + sum(f.total_length for f in self.fields)

    @property
    def display_tags(self) -> Tuple[str, ...]:
        return (self.category.label,) + self.tags.tags

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "author": {"name": self.author.name, "image_url": self.author.image_url},
            "category": self.category.label,
            "color": list(self.category.color),
            "fields": [{"name": f.name, "data": f.data} for f in self.fields],
            "tags": list(self.tags),
            "footer": TAG_JOINER.join(self.display_tags),
            "image_url": self.image_url,
        }


@dataclass
class RecipeSubmission:
    """Raw form input as typed by the user, before any validation."""

    author_name: str
    author_image_url: str
    title: str
    ingredients: str
    cooking_steps: str
    notes: Optional[str] = None
    tags: Optional[str] = None
    image_url: Optional[str] = None


@dataclass(frozen=True)
class RecipeEntry:
    id: int
    title: str
    author_name: str
    category: Optional[RecipeCategory] = None
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TagEntry:
    id: int
    tag: str


RecipeResult = Union[RecipeDocument, ValidationFailure]
