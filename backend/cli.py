import json
import argparse
import sys

from pydantic import ValidationError

from backend.settings import get_settings
from domain.models import RecurringPattern
from domain.scheduling import (
    InvalidPatternError,
    PatternTooLargeError,
    expand,
    get_common_patterns,
    preview,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Expand recurring workout patterns into dates")
    subparsers = parser.add_subparsers(dest="command", required=True)

    expand_parser = subparsers.add_parser("expand", help="Print the occurrence dates of a pattern")
    expand_parser.add_argument("input", help="Pattern JSON file path")
    expand_parser.add_argument("--preview", action="store_true", help="Only expand the preview window")
    expand_parser.add_argument("--days", type=int, help="Preview window length in days")
    expand_parser.add_argument("-o", "--output", help="Output file path (default: stdout)")

    subparsers.add_parser("presets", help="Print the common pattern presets as JSON")
    return parser


def run_expand(args) -> str:
    settings = get_settings()

    # Load pattern JSON
    with open(args.input, 'r') as f:
        pattern = RecurringPattern.model_validate(json.load(f))

    if args.preview or args.days is not None:
        dates = preview(
            pattern,
            args.days if args.days is not None else settings.preview_days,
            max_occurrences=settings.max_occurrences,
        )
    else:
        dates = expand(pattern, max_occurrences=settings.max_occurrences)

    return "\n".join(d.isoformat() for d in dates)


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        if args.command == "presets":
            result = json.dumps(get_common_patterns(), indent=2)
        else:
            result = run_expand(args)

        # Output result
        if getattr(args, "output", None):
            with open(args.output, 'w') as f:
                f.write(result + "\n")
        else:
            print(result)

    except FileNotFoundError:
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        sys.exit(1)
    except ValidationError as e:
        print(f"Error: Invalid pattern: {e}", file=sys.stderr)
        sys.exit(1)
    except InvalidPatternError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        for error in e.errors:
            print(f"  - {error}", file=sys.stderr)
        sys.exit(1)
    except PatternTooLargeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
