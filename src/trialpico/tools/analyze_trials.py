#!/usr/bin/env python3
"""Command-line utility for PICO structural reading of trials.

Reads trials from a JSON document and prints the deterministic comparator and
endpoint analysis. Accepted documents:
- a list of trial objects (nctId, phase, arms, primaryOutcomes, ...)
- a single trial object
- ClinicalTrials.gov API v2 studies ({"studies": [...]}, a study, or a list)

Usage:
    python -m trialpico.tools.analyze_trials trials.json
    python -m trialpico.tools.analyze_trials trials.json --format report
    python -m trialpico.tools.analyze_trials studies.json --summary
    python -m trialpico.tools.analyze_trials trials.json --prompt --mode advanced
    cat trials.json | python -m trialpico.tools.analyze_trials --stdin

Output formats:
    --format json     JSON output (default)
    --format report   Rich panel
    --format note     Combined one-paragraph structural note
"""

import argparse
import json
import logging
import sys
from typing import Any, TextIO

from pydantic import ValidationError

from trialpico.engine import PicoAnalysisEngine
from trialpico.ingest.clinicaltrials import TrialPayloadError, is_registry_study, parse_studies
from trialpico.llm.prompts import create_narrative_prompt
from trialpico.models.trial import Trial
from trialpico.narrative.notes import pico_note
from trialpico.utils.logging_config import get_logger


def load_trials(source: TextIO) -> list[Trial]:
    """Load trials from a JSON stream.

    Raises:
        TrialPayloadError: If the stream is not JSON or holds no trials
        ValidationError: If a trial object has invalid fields
    """
    try:
        document = json.load(source)
    except json.JSONDecodeError as e:
        raise TrialPayloadError(f"Invalid JSON: {e}") from e

    return trials_from_document(document)


def trials_from_document(document: Any) -> list[Trial]:
    """Convert a decoded JSON document into Trial models."""
    if isinstance(document, dict) and "studies" in document:
        return parse_studies(document)
    if is_registry_study(document):
        return parse_studies(document)
    if isinstance(document, list):
        if any(is_registry_study(item) for item in document):
            return parse_studies(document)
        if not all(isinstance(item, dict) for item in document):
            raise TrialPayloadError("Every trial entry must be a JSON object")
        return [Trial.model_validate(item) for item in document]
    if isinstance(document, dict):
        return [Trial.model_validate(document)]

    raise TrialPayloadError("Expected a trial object, a list of trials, or registry studies")


def render(trials: list[Trial], args: argparse.Namespace) -> str:
    """Run the requested analysis and format its output."""
    engine = PicoAnalysisEngine()
    indent = None if args.compact else 2

    if args.summary:
        stats = engine.summarize_comparators(trials)
        if args.format == "report":
            return stats.to_report()
        return json.dumps(stats.model_dump(mode="json", by_alias=True), indent=indent)

    if args.single:
        analysis = engine.analyze_single(trials[0]) if trials else engine.analyze([])
    else:
        analysis = engine.analyze(trials)

    if args.prompt:
        messages = create_narrative_prompt(
            analysis,
            mode=args.mode,
            drug_name=args.drug,
            indication=args.indication,
        )
        return json.dumps(messages, indent=indent, ensure_ascii=False)

    if args.format == "report":
        return analysis.to_report()
    if args.format == "note":
        return pico_note(analysis)
    return json.dumps(analysis.to_dict(), indent=indent)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Deterministic PICO reading of clinical-trial comparators and endpoints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s trials.json
  %(prog)s trials.json --format report
  %(prog)s studies.json --summary
  %(prog)s trials.json --prompt --drug pembrolizumab --indication NSCLC
"""
    )

    parser.add_argument(
        'input',
        nargs='?',
        type=argparse.FileType('r'),
        help='JSON file with trials or registry studies'
    )
    parser.add_argument(
        '--stdin', '-i',
        action='store_true',
        help='Read the JSON document from stdin'
    )
    parser.add_argument(
        '--format', '-f',
        choices=['json', 'report', 'note'],
        default='json',
        help='Output format (default: json)'
    )
    parser.add_argument(
        '--single', '-s',
        action='store_true',
        help='Analyze only the first trial'
    )
    parser.add_argument(
        '--summary',
        action='store_true',
        help='Print per-arm comparator counts instead of the analysis (json or report)'
    )
    parser.add_argument(
        '--prompt',
        action='store_true',
        help='Print LLM grounding messages for the analysis'
    )
    parser.add_argument(
        '--mode',
        choices=['basic', 'advanced'],
        default='basic',
        help='Narrative length for --prompt (default: basic)'
    )
    parser.add_argument('--drug', help='Drug name added to --prompt context')
    parser.add_argument('--indication', help='Indication added to --prompt context')
    parser.add_argument(
        '--compact', '-c',
        action='store_true',
        help='Compact JSON output (no indentation)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log classification details to stderr'
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    get_logger(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.stdin:
        source = sys.stdin
    elif args.input:
        source = args.input
    else:
        parser.error("Provide an input file or --stdin")

    try:
        trials = load_trials(source)
    except (TrialPayloadError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    finally:
        if source is not sys.stdin:
            source.close()

    print(render(trials, args))
    return 0


if __name__ == '__main__':
    sys.exit(main())
