import pytest

from recipe_models import LimitPolicy


@pytest.fixture
def policy():
    return LimitPolicy(
        max_author_name=256,
        max_field_name=256,
        max_field_data=1024,
        max_title=256,
        max_recipe_tags_length=2048,
        max_recipe_length=6000,
        max_message_length=2000,
    )
