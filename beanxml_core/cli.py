"""
Command Line Interface
======================

    beanxml detect beans.xml legacy-beans.xml
    beanxml load beans.xml --mode xsd --search-path resources
"""

import argparse
import codecs
import logging
import sys
from pathlib import Path
from typing import List, Optional

from beanxml_core.config.settings import LoaderConfig, load_config
from beanxml_core.errors import BeanXmlError
from beanxml_core.loading.reader import XmlDefinitionReader
from beanxml_core.validation.base import CollectingErrorHandler
from beanxml_core.validation.detector import ValidationModeDetector
from beanxml_core.validation.mode import ValidationMode

logger = logging.getLogger("beanxml_core")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _mode_choice(value: str) -> ValidationMode:
    try:
        return ValidationMode.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _encoding_choice(value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError:
        raise argparse.ArgumentTypeError(f"unknown encoding: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="beanxml",
        description="Detect validation modes and load XML definition documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s detect beans.xml
  %(prog)s load beans.xml --mode xsd --search-path resources
  %(prog)s load beans.xml --config beanxml.yaml
        """
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    detect = subparsers.add_parser("detect", help="Print the validation mode of each file")
    detect.add_argument("files", type=Path, nargs="+", help="XML documents to inspect")
    detect.add_argument(
        "--encoding",
        type=_encoding_choice,
        default="utf-8",
        help="Text encoding of the documents (default: utf-8)"
    )

    load = subparsers.add_parser("load", help="Load and validate a document")
    load.add_argument("file", type=Path, help="XML document to load")
    load.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="JSON or YAML configuration file"
    )
    load.add_argument(
        "-m", "--mode",
        type=_mode_choice,
        default=None,
        help="Validation mode: none, auto, dtd or xsd (default: from config, else auto)"
    )
    load.add_argument(
        "--schemas",
        default=None,
        help="Location of the schema mappings table"
    )
    load.add_argument(
        "-s", "--search-path",
        type=Path,
        action="append",
        default=None,
        help="Directory to search for mappings and schemas (repeatable)"
    )
    return parser


def _run_detect(args: argparse.Namespace) -> int:
    detector = ValidationModeDetector(encoding=args.encoding)
    status = 0
    for path in args.files:
        try:
            mode = detector.detect_file(path)
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            status = 1
            continue
        print(f"{path}: {mode.name}")
    return status


def _run_load(args: argparse.Namespace) -> int:
    config = load_config(args.config) if args.config else LoaderConfig()
    _configure_logging("DEBUG" if args.verbose else config.log_level)
    if args.mode is not None:
        config.document.validation_mode = args.mode.name.lower()
    if args.schemas:
        config.schema.mappings_location = args.schemas
    if args.search_path:
        config.schema.search_paths = [str(p) for p in args.search_path]

    handler = CollectingErrorHandler(source=str(args.file))
    reader = XmlDefinitionReader.from_config(config, error_handler=handler)
    try:
        document = reader.load(args.file)
    except (OSError, BeanXmlError) as e:
        logger.error(f"Failed to load {args.file}: {e}")
        return 1

    print(f"{args.file}: {document.validation_mode.name} <{document.root.tag}>")
    if handler.result.errors:
        print(handler.result.summary())
    return 0 if handler.result.is_valid else 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "detect":
        _configure_logging("DEBUG" if args.verbose else "WARNING")
        return _run_detect(args)
    return _run_load(args)


if __name__ == "__main__":
    sys.exit(main())
