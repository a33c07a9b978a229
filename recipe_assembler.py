from typing import List, Optional, Union

from constants import FIELD_NAME_ADDITIONAL_NOTES, FIELD_NAME_COOKING_STEPS, FIELD_NAME_INGREDIENTS
from recipe_models import (
    FailureKind,
    FieldRecord,
    LimitPolicy,
    RecipeCategory,
    RecipeDocument,
    RecipeResult,
    RecipeSubmission,
    ValidationFailure,
)
from recipe_tags import format_tags, normalize_tags
from recipe_validators import (
    blank,
    invalid_url,
    is_blank,
    is_http_url,
    parse_category,
    too_long,
    validate_author,
    validate_field,
)


def build_fields(
    ingredients: str,
    cooking_steps: str,
    notes: Optional[str],
    policy: LimitPolicy
) -> Union[List[FieldRecord], ValidationFailure]:
    """Validate the mandatory fields and, when non-blank, the notes, in display order."""
    raw_fields = [
        (FIELD_NAME_INGREDIENTS, ingredients),
        (FIELD_NAME_COOKING_STEPS, cooking_steps),
    ]
    if not is_blank(notes):
        raw_fields.append((FIELD_NAME_ADDITIONAL_NOTES, notes))

    fields: List[FieldRecord] = []
    for name, data in raw_fields:
        result = validate_field(name, data, policy)
        if isinstance(result, ValidationFailure):
            return result
        fields.append(result)
    return fields


class RecipeAssembler:
    """Composes validated parts into a RecipeDocument, stopping at the first failure."""

    def __init__(self, policy: LimitPolicy):
        if not isinstance(policy, LimitPolicy):
            raise TypeError("policy must be a LimitPolicy")
        self.policy = policy

    def assemble(
        self,
        author_name: str,
        author_image_url: str,
        title: str,
        ingredients: str,
        cooking_steps: str,
        notes: Optional[str],
        tags: Optional[str],
        category: Union[RecipeCategory, str],
        image_url: Optional[str] = None
    ) -> RecipeResult:
        policy = self.policy
        if title is None:
            raise ValueError("title is required")

        if len(title) > policy.max_title:
            return too_long("Title", policy.max_title)
        if is_blank(title):
            return blank("Title")

        author = validate_author(author_name, author_image_url, policy)
        if isinstance(author, ValidationFailure):
            return author

        fields = build_fields(ingredients, cooking_steps, notes, policy)
        if isinstance(fields, ValidationFailure):
            return fields

        resolved = parse_category(category)
        if isinstance(resolved, ValidationFailure):
            return resolved

        tag_set = normalize_tags(tags)
        if len(format_tags(resolved, tag_set)) > policy.max_recipe_tags_length:
            return too_long("Tags", policy.max_recipe_tags_length, FailureKind.TAGS_TOO_LONG)

        if image_url is not None and not is_http_url(image_url):
            return invalid_url("Recipe image url")

        document = RecipeDocument(
            author=author,
            title=title,
            fields=tuple(fields),
            category=resolved,
            tags=tag_set,
            image_url=image_url,
        )
        if document.total_length > policy.max_recipe_length:
            return too_long("Recipe", policy.max_recipe_length, FailureKind.RECIPE_TOO_LONG)

        return document

    def assemble_submission(self, submission: RecipeSubmission, category: Union[RecipeCategory, str]) -> RecipeResult:
        if submission is None:
            raise ValueError("submission is required")
        return self.assemble(
            submission.author_name,
            submission.author_image_url,
            submission.title,
            submission.ingredients,
            submission.cooking_steps,
            submission.notes,
            submission.tags,
            category,
            image_url=submission.image_url,
        )


def assemble_recipe(
    policy: LimitPolicy,
    author_name: str,
    author_image_url: str,
    title: str,
    ingredients: str,
    cooking_steps: str,
    notes: Optional[str] = None,
    tags: Optional[str] = None,
    category: Union[RecipeCategory, str] = RecipeCategory.OTHER,
    image_url: Optional[str] = None
) -> RecipeResult:
    return RecipeAssembler(policy).assemble(
        author_name, author_image_url, title, ingredients, cooking_steps, notes, tags, category, image_url
    )
