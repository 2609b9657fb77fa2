import argparse
import json
import logging
import sys
from pathlib import Path

from src.adapters.rules_port import RulesOGAdapter
from src.components.og_tags import (
    GENERATED_FIELDS,
    GenerateInput,
    InspectInput,
    OGRecord,
    Severity,
    UnknownTemplateError,
    get_template,
    list_templates,
    run_generate,
    run_inspect,
)
from src.rules.loader import load_rules, resolve_rules_path
from src.rules.models import Rules

logger = logging.getLogger("cli")


def get_rules() -> Rules:
    rules_path = resolve_rules_path()
    if not rules_path.exists():
        logger.warning(f"Rules file {rules_path} not found, using defaults.")
        return Rules()
    return load_rules(rules_path)


def _read_markup(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def handle_inspect(rules: Rules, args: argparse.Namespace) -> int:
    try:
        markup = _read_markup(args.file)
    except OSError as e:
        logger.error(f"Cannot read {args.file}: {e}")
        return 2

    result = run_inspect(InspectInput(html=markup), rules=RulesOGAdapter(rules))

    if args.json:
        print(
            json.dumps(
                {
                    "data": result.record.to_dict(),
                    "issues": [issue.to_dict() for issue in result.issues],
                },
                indent=2,
            )
        )
    else:
        data = result.record.to_dict()
        if not data:
            print("No recognized meta tags found.")
        for key, value in data.items():
            shown = ", ".join(value) if isinstance(value, list) else value
            print(f"{key}: {shown}")
        print()
        for issue in result.issues:
            print(f"[{issue.severity.value}] {issue.property}: {issue.message}")
            if issue.suggestion:
                print(f"    {issue.suggestion.replace(chr(10), chr(10) + '    ')}")
        print(result.summary.headline)

    return 1 if result.summary.errors else 0


def handle_generate(rules: Rules, args: argparse.Namespace) -> int:
    values = {attr: getattr(args, attr) for attr, _, _ in GENERATED_FIELDS}
    result = run_generate(GenerateInput(record=OGRecord.from_dict(values)))
    if not result.success:
        for error in result.errors:
            logger.error(error.message)
        return 1
    print(result.html)
    return 0


def handle_template(rules: Rules, args: argparse.Namespace) -> int:
    if args.key is None:
        for template in list_templates():
            print(f"{template.key}\t{template.name}")
        return 0
    try:
        print(get_template(args.key).content)
    except UnknownTemplateError:
        logger.error(f"Template {args.key} not found.")
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="OG Tag Lab CLI")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # inspect
    inspect_parser = subparsers.add_parser("inspect", help="Parse and validate meta tag markup")
    inspect_parser.add_argument("file", help="HTML file to inspect ('-' for stdin)")
    inspect_parser.add_argument("--json", action="store_true", help="Print JSON output")

    # generate
    generate_parser = subparsers.add_parser("generate", help="Generate meta tag markup")
    for attr, _, prop in GENERATED_FIELDS:
        generate_parser.add_argument(
            f"--{attr.replace('_', '-')}", dest=attr, default=None, help=f"Value for {prop}"
        )

    # template
    template_parser = subparsers.add_parser("template", help="Print a starter template")
    template_parser.add_argument("key", nargs="?", help="Template key (omit to list)")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    rules = get_rules()
    logging.basicConfig(level=logging.DEBUG if args.verbose else rules.logging.level.upper())

    handlers = {
        "inspect": handle_inspect,
        "generate": handle_generate,
        "template": handle_template,
    }
    return handlers[args.command](rules, args)


if __name__ == "__main__":
    sys.exit(main())
