"""docuscript CLI entry point."""
from __future__ import annotations

import argparse
import asyncio
import json
import random
import sys
from pathlib import Path

from loguru import logger

from docuscript import config

NARRATION_STYLES = ("documentary", "commercial", "narrative")


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else config.LOG_LEVEL)


def _rng(seed) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docuscript",
        description="docuscript: storyboard and transcript to documentary script",
    )
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level to stderr")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    convert = sub.add_parser(
        "convert-storyboard",
        help="Convert storyboard frames JSON → Script JSON",
    )
    convert.add_argument("--frames", required=True, metavar="frames.json",
                         help="Path to a JSON array of storyboard frames")
    convert.add_argument("--output", required=True, metavar="script.json",
                         help="Destination path for the Script JSON")
    convert.add_argument("--style", choices=NARRATION_STYLES, default="documentary",
                         help="Narration style for voiceovers")
    convert.add_argument("--narrate", action="store_true",
                         help="Rewrite voiceover text as narration")
    convert.add_argument("--seed", type=int, help="Seed for ids and template choices")

    transcript = sub.add_parser(
        "process-transcript",
        help="Convert a transcription project JSON → interview Script JSON",
    )
    transcript.add_argument("--project", required=True, metavar="project.json",
                            help="Path to a transcription project JSON file")
    transcript.add_argument("--output", required=True, metavar="script.json",
                            help="Destination path for the Script JSON")
    transcript.add_argument("--seed", type=int, help="Seed for ids")

    analyze = sub.add_parser("analyze-text", help="Score a scene description")
    analyze.add_argument("--text", required=True, help="Scene description")

    from_text = sub.add_parser(
        "storyboard-from-text",
        help="Draft visual storyboard frames from free text",
    )
    from_text.add_argument("--text", required=True, help="Free-text scene outline")
    from_text.add_argument("--output", required=True, metavar="storyboard.json",
                           help="Destination path for the frames JSON")
    from_text.add_argument("--seed", type=int, help="Seed for ids and prop placement")

    narrate = sub.add_parser("narrate", help="Wrap text in voiceover narration")
    narrate.add_argument("--text", required=True, help="Text to narrate")
    narrate.add_argument("--style", choices=NARRATION_STYLES, default="documentary")
    narrate.add_argument("--seed", type=int, help="Seed for template choices")

    ab_test = sub.add_parser("ab-test", help="Generate A/B variations of a Script")
    ab_test.add_argument("--script", required=True, metavar="script.json",
                         help="Path to a Script JSON file")
    ab_test.add_argument("--output", required=True, metavar="versions.json",
                         help="Destination path for the versions JSON")
    ab_test.add_argument("--variations", type=int, default=3, help="Number of versions")
    ab_test.add_argument("--seed", type=int, help="Seed for ids")

    suggest = sub.add_parser("suggest", help="List edit suggestions for one element")
    suggest.add_argument("--script", required=True, metavar="script.json",
                         help="Path to a Script JSON file")
    suggest.add_argument("--element", required=True, metavar="ID", help="Element id")

    validate = sub.add_parser("validate-script", help="Validate a Script JSON file")
    validate.add_argument("--script", required=True, metavar="script.json",
                          help="Path to a Script JSON file")
    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    handlers = {
        "convert-storyboard": _convert_storyboard,
        "process-transcript": _process_transcript,
        "analyze-text": _analyze_text,
        "storyboard-from-text": _storyboard_from_text,
        "narrate": _narrate,
        "ab-test": _ab_test,
        "suggest": _suggest,
        "validate-script": _validate_script,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        sys.exit(1)

    from pydantic import ValidationError

    try:
        handler(args)
    except (OSError, json.JSONDecodeError) as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)
    except ValidationError as exc:
        print(f"ERROR: invalid input: {exc.error_count()} validation error(s)")
        sys.exit(1)
    sys.exit(0)


# ── Subcommands ──────────────────────────────────────────────────────────────


def _convert_storyboard(args) -> None:
    from docuscript.composition.converter import convert_storyboard
    from docuscript.composition.models import ConversionSettings
    from docuscript.schemas import dump_script, load_frames

    frames = load_frames(Path(args.frames))
    settings = ConversionSettings(generate_narration=args.narrate, narrative_style=args.style)
    script = asyncio.run(convert_storyboard(frames, settings, rng=_rng(args.seed)))
    Path(args.output).write_text(dump_script(script), encoding="utf-8")
    print(f"OK: wrote {len(script.content)} elements to {args.output}")


def _process_transcript(args) -> None:
    from docuscript.composition.composer import process_transcription
    from docuscript.schemas import dump_script, load_transcription

    project = load_transcription(Path(args.project))
    script = process_transcription(project, rng=_rng(args.seed))
    Path(args.output).write_text(dump_script(script), encoding="utf-8")
    print(f"OK: wrote {len(script.content)} elements to {args.output}")


def _analyze_text(args) -> None:
    from docuscript.schemas import dump_analysis
    from docuscript.storyboard.analyzer import analyze_text_description

    print(dump_analysis(asyncio.run(analyze_text_description(args.text))))


def _storyboard_from_text(args) -> None:
    from docuscript.schemas import dump_storyboard
    from docuscript.storyboard.frames import generate_storyboard_from_text

    frames = asyncio.run(generate_storyboard_from_text(args.text, rng=_rng(args.seed)))
    Path(args.output).write_text(dump_storyboard(frames), encoding="utf-8")
    print(f"OK: wrote {len(frames)} frames to {args.output}")


def _narrate(args) -> None:
    from docuscript.composition.narration import generate_voiceover_narration

    print(generate_voiceover_narration(args.text, args.style, rng=_rng(args.seed)))


def _ab_test(args) -> None:
    from docuscript.composition.variations import generate_ab_test_versions
    from docuscript.schemas import load_script

    script = load_script(Path(args.script))
    versions = generate_ab_test_versions(script, args.variations, rng=_rng(args.seed))
    raw = [json.loads(v.model_dump_json(by_alias=True, exclude_none=True)) for v in versions]
    Path(args.output).write_text(
        json.dumps(raw, sort_keys=True, indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    print(f"OK: wrote {len(versions)} versions to {args.output}")


def _suggest(args) -> None:
    from docuscript.composition.suggestions import generate_auto_suggestions
    from docuscript.schemas import load_script

    script = load_script(Path(args.script))
    element = next((e for e in script.content if e.id == args.element), None)
    if element is None:
        print(f"ERROR: no element with id {args.element!r}")
        sys.exit(1)
    suggestions = generate_auto_suggestions(element, script.content)
    raw = [json.loads(s.model_dump_json(by_alias=True)) for s in suggestions]
    print(json.dumps(raw, sort_keys=True, indent=2, ensure_ascii=False))


def _validate_script(args) -> None:
    import jsonschema

    from docuscript.contract_validate import validate_script as validate_contract
    from docuscript.schemas import validate_script

    data = json.loads(Path(args.script).read_text(encoding="utf-8"))
    errors = validate_script(data)
    if errors:
        print("ERROR: invalid Script")
        for error in errors:
            print(f"  {error}")
        sys.exit(1)
    try:
        validate_contract(data)
    except jsonschema.ValidationError as exc:
        print(f"ERROR: invalid Script: {exc.message}")
        sys.exit(1)
    print("OK: Script is valid")


if __name__ == "__main__":
    main()
