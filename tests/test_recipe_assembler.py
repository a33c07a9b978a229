from dataclasses import replace

import pytest

from constants import FIELD_NAME_ADDITIONAL_NOTES, FIELD_NAME_COOKING_STEPS, FIELD_NAME_INGREDIENTS
from recipe_assembler import RecipeAssembler, assemble_recipe
from recipe_models import FailureKind, RecipeCategory, RecipeDocument, RecipeSubmission, ValidationFailure

AVATAR = "https://cdn.example.com/avatars/1.png"


def make_submission(**overrides):
    values = dict(
        author_name="Chef",
        author_image_url=AVATAR,
        title="Pancakes",
        ingredients="2 eggs, 250 ml milk, 125 g flour",
        cooking_steps="Whisk everything. Fry in a hot pan.",
    )
    values.update(overrides)
    return RecipeSubmission(**values)


def assemble(policy, category=RecipeCategory.PASTRY, **overrides):
    return RecipeAssembler(policy).assemble_submission(make_submission(**overrides), category)


def test_assemble_builds_document_with_mandatory_fields(policy):
    document = assemble(policy)

    assert isinstance(document, RecipeDocument)
    assert document.title == "Pancakes"
    assert document.author.name == "Chef"
    assert [f.name for f in document.fields] == [FIELD_NAME_INGREDIENTS, FIELD_NAME_COOKING_STEPS]
    assert document.category == RecipeCategory.PASTRY
    assert document.image_url is None


def test_assemble_appends_non_blank_notes(policy):
    document = assemble(policy, notes="Serve warm.")

    assert document.fields[-1].name == FIELD_NAME_ADDITIONAL_NOTES
    assert document.fields[-1].data == "Serve warm."


@pytest.mark.parametrize("notes", [None, "", "   \n"])
def test_assemble_omits_blank_notes(policy, notes):
    document = assemble(policy, notes=notes)

    assert len(document.fields) == 2


def test_total_length_matches_parts(policy):
    document = assemble(policy, notes="Serve warm.", tags="breakfast, sweet")

    expected = len("Pancakes") + len("Chef") + sum(len(f.name) + len(f.data) for f in document.fields)
    assert document.total_length == expected


def test_title_at_limit_succeeds_and_one_over_fails(policy):
    policy = replace(policy, max_title=10)

    assert isinstance(assemble(policy, title="x" * 10), RecipeDocument)

    failure = assemble(policy, title="x" * 11)
    assert failure.kind == FailureKind.FIELD_TOO_LONG
    assert failure.subject == "Title"
    assert failure.limit == 10
    assert "10" in failure.message


def test_title_is_checked_before_everything_else(policy):
    policy = replace(policy, max_title=3)

    failure = assemble(policy, author_name="", ingredients="")

    assert failure.subject == "Title"


def test_blank_title_is_invalid_field(policy):
    assert assemble(policy, title="  ").kind == FailureKind.INVALID_FIELD


def test_author_failure_short_circuits_field_validation(policy):
    failure = assemble(policy, author_image_url="nope", ingredients="")

    assert failure.kind == FailureKind.INVALID_URL


def test_first_failing_field_is_reported(policy):
    failure = assemble(policy, ingredients=" ", cooking_steps="")

    assert failure.kind == FailureKind.INVALID_FIELD
    assert FIELD_NAME_INGREDIENTS in failure.message


def test_field_data_at_limit_succeeds_and_one_over_fails(policy):
    policy = replace(policy, max_field_data=40)

    assert isinstance(assemble(policy, cooking_steps="s" * 40), RecipeDocument)

    failure = assemble(policy, cooking_steps="s" * 41)
    assert failure.kind == FailureKind.FIELD_TOO_LONG
    assert "40" in failure.message


def test_oversized_notes_fail(policy):
    policy = replace(policy, max_field_data=40)

    failure = assemble(policy, notes="n" * 41)

    assert failure.kind == FailureKind.FIELD_TOO_LONG
    assert FIELD_NAME_ADDITIONAL_NOTES in failure.message


def test_tags_are_normalized_and_category_not_stored(policy):
    document = assemble(policy, category=RecipeCategory.OTHER, tags="Tag1, Tag2,      Tag1")

    assert document.tags.tags == ("tag1", "tag2")
    assert document.to_dict()["footer"] == "Other, tag1, tag2"


def test_tags_length_includes_category_label(policy):
    # "Other, tag1, tag2" is 17 characters.
    assert isinstance(assemble(replace(policy, max_recipe_tags_length=17), category="Other", tags="tag1,tag2"), RecipeDocument)

    failure = assemble(replace(policy, max_recipe_tags_length=16), category="Other", tags="tag1,tag2")
    assert failure.kind == FailureKind.TAGS_TOO_LONG
    assert failure.limit == 16
    assert "16" in failure.message


def test_invalid_category_fails(policy):
    failure = assemble(policy, category="Soup")

    assert failure.kind == FailureKind.INVALID_CATEGORY


def test_recipe_image_url_is_validated(policy):
    assert assemble(policy, image_url="https://example.com/pancakes.jpg").image_url == "https://example.com/pancakes.jpg"
    assert assemble(policy, image_url="pancakes.jpg").kind == FailureKind.INVALID_URL


def test_aggregate_length_over_limit_fails_after_parts_validate(policy):
    document = assemble(policy)
    exact = replace(policy, max_recipe_length=document.total_length)

    assert isinstance(assemble(exact), RecipeDocument)

    failure = assemble(replace(policy, max_recipe_length=document.total_length - 1))
    assert failure.kind == FailureKind.RECIPE_TOO_LONG
    assert failure.limit == document.total_length - 1
    assert str(document.total_length - 1) in failure.message


def test_aggregate_length_ignores_tags(policy):
    document = assemble(policy)
    exact = replace(policy, max_recipe_length=document.total_length)

    assert isinstance(assemble(exact, tags="lots, of, extra, tags"), RecipeDocument)


def test_assemble_recipe_function(policy):
    result = assemble_recipe(
        policy, "Chef", AVATAR, "Tea", "Tea leaves", "Steep for 3 minutes.", tags="Hot", category="Drinks"
    )

    assert isinstance(result, RecipeDocument)
    assert result.display_tags == ("Drinks", "hot")


def test_assembler_requires_policy():
    with pytest.raises(TypeError):
        RecipeAssembler(None)


def test_missing_title_is_a_programmer_error(policy):
    with pytest.raises(ValueError):
        RecipeAssembler(policy).assemble("Chef", AVATAR, None, "a", "b", None, None, RecipeCategory.OTHER)


def test_failure_str_is_message(policy):
    failure = assemble(policy, title=" ")

    assert isinstance(failure, ValidationFailure)
    assert str(failure) == failure.message
