#!/usr/bin/env python3
"""
Story Gateway - Command Line Entry Point

Run with: python -m story_gateway <command> ...

Commands:
  storyboard  Split a story (text or file) into scenes, print JSON
  speech      Synthesize narration to a WAV file
  image       Generate a 9:16 scene image, optionally style-referenced
  check       Report whether an image shows a character
  set-key     Save a Gemini API key to the config file
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from . import config
from .gateway import decompose_storyboard, generate_scene_image, has_character, synthesize_speech
from .logging_utils import log_exception, log_info, setup_logging
from .processing.audio_utils import save_speech_wav
from .processing.image_utils import load_image_as_data_uri, save_data_uri_image


def _read_text_arg(value: str) -> str:
    """Treat value as a path if such a file exists, else as literal text."""
    path = Path(value)
    if path.is_file():
        return path.read_text(encoding="utf-8")
    return value


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="story-gateway",
        description=f"{config.APP_NAME} v{config.APP_VERSION} - Gemini speech, storyboard and scene images",
    )
    parser.add_argument("--api-key", default=None, help="Gemini API key (overrides API_KEY)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("storyboard", help="Split a story into one scene per sentence")
    p.add_argument("text", help="Story text, or path to a text file")

    p = sub.add_parser("speech", help="Synthesize narration to WAV")
    p.add_argument("text", help="Text to speak, or path to a text file")
    p.add_argument("--voice", default=config.DEFAULT_VOICE, choices=config.VOICE_NAMES)
    p.add_argument("--style", default="", help="Delivery instructions for the narrator")
    p.add_argument("--out", required=True, type=Path, help="Output .wav path")

    p = sub.add_parser("image", help="Generate a 9:16 scene image")
    p.add_argument("prompt", help="Scene description")
    p.add_argument("--reference", type=Path, default=None, help="Style reference image")
    p.add_argument("--out", required=True, type=Path, help="Output path (saved as .png)")

    p = sub.add_parser("check", help="Check an image for a character")
    p.add_argument("image", type=Path)

    p = sub.add_parser("set-key", help=f"Save an API key to {config.CONFIG_PATH}")
    p.add_argument("key")

    return parser


def run_command(args: argparse.Namespace) -> int:
    """Execute one parsed command. Returns the exit code."""
    if args.command == "storyboard":
        segments = decompose_storyboard(_read_text_arg(args.text), api_key=args.api_key)
        print(json.dumps([s.to_dict() for s in segments], indent=2, ensure_ascii=False))
        return 0

    if args.command == "speech":
        audio = synthesize_speech(_read_text_arg(args.text), args.voice, args.style, api_key=args.api_key)
        if audio is None:
            print("[WARN] No audio returned.")
            return 1
        out = save_speech_wav(audio, args.out)
        print(f"[INFO] Saved narration to {out}")
        return 0

    if args.command == "image":
        reference = load_image_as_data_uri(args.reference) if args.reference else None
        image = generate_scene_image(args.prompt, reference, api_key=args.api_key)
        if image is None:
            print("[WARN] No image returned.")
            return 1
        out = save_data_uri_image(image, args.out)
        print(f"[INFO] Saved scene image to {out}")
        return 0

    if args.command == "check":
        result = has_character(load_image_as_data_uri(args.image), api_key=args.api_key)
        print(json.dumps({"hasCharacter": result}))
        return 0

    if args.command == "set-key":
        cfg = config.load_config()
        cfg["api_key"] = args.key.strip()
        config.save_config(cfg)
        print(f"[INFO] Saved API key to {config.CONFIG_PATH}.")
        return 0

    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    setup_logging()
    args = create_argument_parser().parse_args(argv)
    log_info(f"CLI: command={args.command}")

    try:
        return run_command(args)
    except Exception as e:
        log_exception(f"Command {args.command} failed: {e}")
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
