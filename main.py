"""
Command line entry point.

    python main.py score payload.json         score an AI extraction payload
    python main.py text "Sugar, Maida, E621"  score pasted ingredient text
    python main.py off product.json           score a saved Open Food Facts document
    python main.py insights MSG E102          rule-table annotations only
"""
import argparse
import json
import sys
from pathlib import Path

from config import configure_logging
from wellness.analysis import analyze_product
from wellness.extraction import (
    ExtractionFailedError,
    open_food_facts_category,
    scoring_input_from_extraction,
    scoring_input_from_open_food_facts,
    scoring_input_from_text,
)
from wellness.rule_engine.evaluator import run_fssai_rules


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _load_json(path: Path):
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ExtractionFailedError(f"{path} is not valid JSON ({e})") from e


def cmd_score(args: argparse.Namespace) -> int:
    path = Path(args.payload)
    try:
        payload = _load_json(path)
        scoring_input = scoring_input_from_extraction(payload)
    except OSError as e:
        print(f"Cannot read {path}: {e}", file=sys.stderr)
        return 1
    except ExtractionFailedError as e:
        print(f"extraction failed: {e}", file=sys.stderr)
        return 1

    category = payload.get("productCategory") if isinstance(payload.get("productCategory"), str) else None
    analysis = analyze_product(scoring_input, product_category=category)
    _print_json(analysis.model_dump(mode="json", by_alias=True))
    return 0


def cmd_off(args: argparse.Namespace) -> int:
    path = Path(args.document)
    try:
        off_data = _load_json(path)
        scoring_input = scoring_input_from_open_food_facts(off_data)
    except OSError as e:
        print(f"Cannot read {path}: {e}", file=sys.stderr)
        return 1
    except ExtractionFailedError as e:
        print(f"extraction failed: {e}", file=sys.stderr)
        return 1

    category = args.category or open_food_facts_category(off_data)
    analysis = analyze_product(scoring_input, product_category=category)
    _print_json(analysis.model_dump(mode="json", by_alias=True))
    return 0


def cmd_text(args: argparse.Namespace) -> int:
    try:
        scoring_input = scoring_input_from_text(args.text)
    except ExtractionFailedError as e:
        print(f"extraction failed: {e}", file=sys.stderr)
        return 1

    analysis = analyze_product(scoring_input, product_category=args.category)
    _print_json(analysis.model_dump(mode="json", by_alias=True))
    return 0


def cmd_insights(args: argparse.Namespace) -> int:
    insights = run_fssai_rules(args.ingredients)
    _print_json([i.model_dump(mode="json") for i in insights])
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deterministic wellness scoring for food labels")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL from the environment")
    subparsers = parser.add_subparsers(dest="command", required=True)

    score = subparsers.add_parser("score", help="Score an extraction payload JSON file")
    score.add_argument("payload", help="Path to the extraction JSON")
    score.set_defaults(func=cmd_score)

    text = subparsers.add_parser("text", help="Score a comma separated ingredient list")
    text.add_argument("text")
    text.add_argument("--category", default=None, help="Product category for display")
    text.set_defaults(func=cmd_text)

    off = subparsers.add_parser("off", help="Score a saved Open Food Facts product document")
    off.add_argument("document", help="Path to the Open Food Facts JSON")
    off.add_argument("--category", default=None, help="Override the category taken from the document")
    off.set_defaults(func=cmd_off)

    insights = subparsers.add_parser("insights", help="Rule-table annotations for ingredients")
    insights.add_argument("ingredients", nargs="+")
    insights.set_defaults(func=cmd_insights)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        configure_logging(args.log_level.upper())
    else:
        configure_logging()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
