"""Command-line entry point for reading and writing PNG character cards."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from chara_card.config import ConfigLoader, ConfigLoadError
from chara_card.png import PngError, PngInvalidCharacterError
from chara_card.services.character_cards import FormatDetector, PngCodec

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None):
    """Configure logging."""
    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )
    logging.getLogger('chara_card').setLevel(level)
    # Pillow logs every chunk it sees at DEBUG
    logging.getLogger('PIL').setLevel(logging.WARNING)


def _cmd_parse(codec: PngCodec, args: argparse.Namespace) -> int:
    text = codec.parse_file(args.image)
    if args.pretty:
        try:
            text = json.dumps(json.loads(text), indent=2, ensure_ascii=False)
        except json.JSONDecodeError as e:
            raise PngInvalidCharacterError(f"Character data is not valid JSON: {e}") from e
    print(text)
    return 0


def _cmd_embed(codec: PngCodec, args: argparse.Namespace) -> int:
    try:
        json_text = Path(args.json_file).read_bytes().decode('utf-8')
    except UnicodeDecodeError as e:
        raise PngInvalidCharacterError(f"{args.json_file} is not valid UTF-8: {e}") from e
    output = codec.generate_file(args.image, json_text, args.output)
    print(output)
    return 0


def _cmd_chunks(codec: PngCodec, args: argparse.Namespace) -> int:
    for info in codec.inspect(Path(args.image).read_bytes()):
        line = f"{info.type}  length={info.length}  crc=0x{info.crc:08x}"
        if info.keyword is not None:
            line += f"  keyword={info.keyword!r}"
        print(line)
    return 0


def _cmd_detect(codec: PngCodec, args: argparse.Namespace) -> int:
    spec = FormatDetector.detect(codec.parse_file(args.image))
    print(f"{spec.value} ({FormatDetector.get_format_name(spec)})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chara-card",
        description="Read and write character cards embedded in PNG images",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to codec YAML config")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("parse", help="Print the embedded card JSON")
    p.add_argument("image", type=Path)
    p.add_argument("--pretty", action="store_true", help="Pretty-print the JSON")
    p.set_defaults(handler=_cmd_parse)

    p = subparsers.add_parser("embed", help="Embed card JSON into an image")
    p.add_argument("image", type=Path)
    p.add_argument("json_file", type=Path)
    p.add_argument("-o", "--output", type=Path, required=True, help="Output PNG path")
    p.set_defaults(handler=_cmd_embed)

    p = subparsers.add_parser("chunks", help="List PNG chunks")
    p.add_argument("image", type=Path)
    p.set_defaults(handler=_cmd_chunks)

    p = subparsers.add_parser("detect", help="Detect the card spec version")
    p.add_argument("image", type=Path)
    p.set_defaults(handler=_cmd_detect)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ConfigLoader().load_config(args.config)
    except ConfigLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    level = "DEBUG" if args.debug else config.logging.level
    setup_logging(level, config.logging.log_file)

    codec = PngCodec(config.codec)
    try:
        return args.handler(codec, args)
    except PngError as e:
        logger.debug(f"{e.kind.value} error", exc_info=True)
        print(f"error: {e.message}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
