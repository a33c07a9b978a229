import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger

from page_formatter import create_recipe_entry_pages, create_tag_entry_pages
from recipe_assembler import RecipeAssembler
from recipe_models import RecipeEntry, TagEntry, ValidationFailure
from recipe_tags import normalize_tag
from recipe_validators import parse_category
from settings import load_limit_policy

PAGE_SEPARATOR = "\n\n"


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _read_json_list(path: Path) -> list:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise SystemExit(f"{path} must contain a JSON list of entries.")
    return data


def _read_json_objects(path: Path, required: tuple) -> List[dict]:
    items = _read_json_list(path)
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise SystemExit(f"{path}: entry {index} must be a JSON object.")
        missing = [key for key in required if key not in item]
        if missing:
            raise SystemExit(f"{path}: entry {index} is missing {', '.join(missing)}.")
        try:
            int(item["id"])
        except (TypeError, ValueError):
            raise SystemExit(f"{path}: entry {index} has a non-integer id {item['id']!r}.")
    return items


def load_recipe_entries(path: Path) -> List[RecipeEntry]:
    entries = []
    for index, item in enumerate(_read_json_objects(path, ("id", "title"))):
        category = None
        if item.get("category"):
            category = parse_category(item["category"])
            if isinstance(category, ValidationFailure):
                raise SystemExit(f"{path}: {category.message}")
        raw_tags = item.get("tags") or []
        if not isinstance(raw_tags, list) or not all(isinstance(t, str) for t in raw_tags):
            raise SystemExit(f"{path}: entry {index} tags must be a list of strings.")
        tags = tuple(dict.fromkeys(normalize_tag(t) for t in raw_tags if t.strip()))
        entries.append(RecipeEntry(
            id=int(item["id"]),
            title=str(item["title"]),
            author_name=str(item.get("author_name") or item.get("author") or ""),
            category=category,
            tags=tags
        ))
    return entries


def load_tag_entries(path: Path) -> List[TagEntry]:
    return [
        TagEntry(id=int(item["id"]), tag=str(item["tag"]))
        for item in _read_json_objects(path, ("id", "tag"))
    ]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Validate recipes and paginate recipe listings within chat message limits.")
    ap.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    sub = ap.add_subparsers(dest="command", required=True)

    recipe = sub.add_parser("recipe", help="Assemble a recipe and print it as JSON")
    recipe.add_argument("--author", required=True, help="Author display name")
    recipe.add_argument("--author-image-url", required=True, help="Author avatar url")
    recipe.add_argument("--title", required=True)
    recipe.add_argument("--ingredients", required=True)
    recipe.add_argument("--steps", required=True, help="Cooking steps")
    recipe.add_argument("--notes", default=None, help="Additional notes")
    recipe.add_argument("--tags", default=None, help="Comma separated tags")
    recipe.add_argument("--category", default="Other", help="Recipe category, e.g. Meat or Dessert")
    recipe.add_argument("--image-url", default=None, help="Recipe image url")

    recipes = sub.add_parser("recipes", help="Print pages listing recipe entries from a JSON file")
    recipes.add_argument("entries", type=Path)
    recipes.add_argument("--category", default=None, help="Only list recipes of this category")
    recipes.add_argument("--tag", default=None, help="Only list recipes carrying this tag")

    tags = sub.add_parser("tags", help="Print pages listing tag entries from a JSON file")
    tags.add_argument("entries", type=Path)
    return ap


def run_recipe(args: argparse.Namespace) -> int:
    assembler = RecipeAssembler(load_limit_policy())
    result = assembler.assemble(
        author_name=args.author,
        author_image_url=args.author_image_url,
        title=args.title,
        ingredients=args.ingredients,
        cooking_steps=args.steps,
        notes=args.notes,
        tags=args.tags,
        category=args.category,
        image_url=args.image_url
    )
    if isinstance(result, ValidationFailure):
        logger.warning(f"Recipe rejected ({result.kind.value}): {result.message}")
        print(result.message, file=sys.stderr)
        return 1

    logger.debug(f"Recipe '{result.title}' assembled with {result.total_length} characters")
    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


def run_recipes(args: argparse.Namespace) -> int:
    category = None
    if args.category:
        category = parse_category(args.category)
        if isinstance(category, ValidationFailure):
            print(category.message, file=sys.stderr)
            return 1

    entries = load_recipe_entries(args.entries)
    pages = create_recipe_entry_pages(entries, load_limit_policy(), category=category, tag=args.tag)
    logger.debug(f"Listed {len(entries)} recipe entries on {len(pages)} page(s)")
    print(PAGE_SEPARATOR.join(pages))
    return 0


def run_tags(args: argparse.Namespace) -> int:
    entries = load_tag_entries(args.entries)
    pages = create_tag_entry_pages(entries, load_limit_policy())
    logger.debug(f"Listed {len(entries)} tag entries on {len(pages)} page(s)")
    print(PAGE_SEPARATOR.join(pages))
    return 0


COMMANDS = {
    "recipe": run_recipe,
    "recipes": run_recipes,
    "tags": run_tags,
}


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    logger.debug(f"Running '{args.command}'")
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
