import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from geolisp import (
    EvaluateOptions,
    GeoLispError,
    evaluate,
    generate_svg_document,
    get_reference,
    print_values,
    tokenize,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Evaluate geolisp geometric construction scripts")
    parser.add_argument("path", nargs="?", help="Path to the script file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for randomized constructions (default: unseeded)",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=EvaluateOptions.max_attempts,
        help="Draws allowed per rejection-sampled construction",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token list before evaluating",
    )
    parser.add_argument(
        "--svg-output-path",
        help="Write an SVG drawing of the output to the given path",
    )
    parser.add_argument(
        "--reference",
        action="store_true",
        help="Print the language reference and exit",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.reference:
        print(get_reference())
        return
    if not args.path:
        parser.error("the following arguments are required: path")

    path = Path(args.path)
    if not path.exists():
        print(f"File not found: {path}", file=sys.stderr)
        raise SystemExit(1)
    text = path.read_text(encoding="utf-8")

    logger.info("Evaluating %s", path)
    try:
        options = EvaluateOptions(random_seed=args.seed, max_attempts=args.max_attempts)
        tokens = tokenize(text)
        if args.tokens:
            for token in tokens:
                print(repr(token))
        values = evaluate(tokens, options=options)
    except (GeoLispError, ValueError) as exc:
        logger.error("Evaluation failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(print_values(values), end="")

    if args.svg_output_path:
        output_path = Path(args.svg_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing SVG document to %s", output_path)
        output_path.write_text(generate_svg_document(values), encoding="utf-8")
        print(f"SVG document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
