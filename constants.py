import re
from typing import Dict, Pattern, Tuple

WHITESPACE_RE: Pattern[str] = re.compile(r"\s+")

TAG_SEPARATOR = ","
TAG_JOINER = ", "

FIELD_NAME_INGREDIENTS = "Ingredients"
FIELD_NAME_COOKING_STEPS = "Cooking steps"
FIELD_NAME_ADDITIONAL_NOTES = "Additional notes"

# Keyed by RecipeCategory.name so the enum and its tables stay in lockstep.
CATEGORY_LABELS: Dict[str, str] = {
    "MEAT": "Meat",
    "FISH": "Fish",
    "VEGETARIAN": "Vegetarian",
    "VEGAN": "Vegan",
    "DRINKS": "Drinks",
    "PASTRY": "Pastry",
    "DESSERT": "Dessert",
    "SNACK": "Snack",
    "OTHER": "Other",
}

CATEGORY_COLORS: Dict[str, Tuple[int, int, int]] = {
    "MEAT": (250, 85, 87),
    "FISH": (86, 153, 220),
    "VEGETARIAN": (206, 221, 85),
    "VEGAN": (6, 167, 125),
    "DRINKS": (175, 234, 224),
    "PASTRY": (206, 132, 173),
    "DESSERT": (176, 69, 162),
    "SNACK": (249, 162, 114),
    "OTHER": (165, 161, 164),
}

CODE_FENCE = "```"

LENGTH_EXCEEDED_MESSAGE = "{subject} must be less or equal to number of {limit} characters."
BLANK_MESSAGE = "{subject} cannot be empty or consist of whitespaces only."
INVALID_URL_MESSAGE = "{subject} is an invalid http or https url."
INVALID_CATEGORY_MESSAGE = "'{value}' is not a valid recipe category. Choose one of: {choices}."

NO_RECIPES_MESSAGE = "No saved recipes are found."
NO_RECIPES_WITH_CATEGORY_MESSAGE = "No saved recipes are found with the given category."
NO_RECIPES_WITH_TAG_MESSAGE = "No saved recipes are found with the tag '{tag}'."
NO_TAGS_MESSAGE = "No saved tags are found."

# Discord's embed and message ceilings, used as defaults by settings.py.
DISCORD_LIMITS: Dict[str, int] = {
    "max_author_name": 256,
    "max_field_name": 256,
    "max_field_data": 1024,
    "max_title": 256,
    "max_recipe_tags_length": 2048,
    "max_recipe_length": 6000,
    "max_message_length": 2000,
}
