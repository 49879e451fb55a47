#!/usr/bin/env python3
"""Check a Conversions API event before sending it.

This script:
1. Loads an event from a JSON file (camelCase or snake_case keys)
2. Validates it and prints every problem found
3. Prints the Event Match Quality score, tier and recommendations
"""

import argparse
import json
import sys
from pathlib import Path

from eventmatch.conversions import (
    ConversionEvent,
    EngineConfig,
    assess_match_quality,
    prepare_event_for_api,
)


def load_event(path: Path) -> ConversionEvent:
    """Read and parse the event file.

    Raises:
        ValueError: If the file is not valid JSON or its top level is not an object.
    """
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return ConversionEvent.from_dict(data)


def print_report(event: ConversionEvent, config: EngineConfig) -> bool:
    """Print a human-readable report. Returns True if the event is valid."""
    prepared = prepare_event_for_api(event)
    report = assess_match_quality(event.user_data, config)

    print("=" * 60)
    print(f"Event: {event.event_name or '<missing name>'} ({event.event_id or 'no event_id'})")
    print("=" * 60)

    if prepared.success:
        print("\nValidation: OK")
    else:
        print(f"\nValidation: {len(prepared.errors)} error(s)")
        for error in prepared.errors:
            print(f"  - {error}")

    print(f"\nEvent Match Quality: {report.score}/100 ({report.tier.value})")
    print(f"Signals: {', '.join(sorted(event.signals)) or 'none'}")

    if report.recommendations:
        print("\nRecommendations:")
        for recommendation in report.recommendations:
            print(f"  - {recommendation}")

    return prepared.success


def main():
    parser = argparse.ArgumentParser(description="Validate and score a Conversions API event")
    parser.add_argument("event", type=Path, help="Path to JSON event file")
    parser.add_argument("--json", action="store_true",
                       help="Print the prepared result and EMQ report as JSON")
    args = parser.parse_args()

    if not args.event.exists():
        print(f"Event file not found: {args.event}")
        sys.exit(1)

    try:
        event = load_event(args.event)
    except ValueError as e:
        print(f"Could not read event: {e}")
        sys.exit(1)

    config = EngineConfig.from_env()

    if args.json:
        prepared = prepare_event_for_api(event)
        report = assess_match_quality(event.user_data, config)
        output = {
            **prepared.to_dict(),
            "match_quality": {
                "score": report.score,
                "tier": report.tier.value,
                "recommendations": report.recommendations,
            },
        }
        print(json.dumps(output, indent=2))
        success = prepared.success
    else:
        success = print_report(event, config)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
