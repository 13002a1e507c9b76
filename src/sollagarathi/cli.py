"""CLI for the Sollagarathi word resolver."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator

from sollagarathi.config import create_from_config, get_default_config_path, load_config
from sollagarathi.policy import ResolutionMode

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Literal["resolve", "finalize", "word-of-the-day"]
    config: Path
    query: str | None = None
    body: str | None = None
    mode: ResolutionMode | None = None
    trace: bool = False
    log_dir: str | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


async def run(args: CLIArgs) -> dict[str, object]:
    """Execute one command against a resolver built from the configuration.

    Args:
        args: Validated CLI arguments.

    Returns:
        The JSON-serialisable result of the command.
    """
    config = load_config(args.config)
    logging.getLogger().setLevel(config.logging.level.upper())
    resolver, resolution_logger = create_from_config(
        config,
        mode_override=args.mode,
        trace_override=args.trace if args.trace else None,
        log_dir_override=args.log_dir,
    )
    logger.debug(f"Config: {args.config}")

    try:
        if args.command == "resolve":
            outcome = await resolver.resolve(args.query or "")
            result = outcome.to_dict()
            if resolution_logger and resolution_logger.last_log_path:
                logger.info(f"Trace written to: {resolution_logger.last_log_path}")
        elif args.command == "finalize":
            entry = await resolver.finalize(args.query or "", args.body)
            result = {"lemma": entry.lemma, "body": entry.body}
        else:
            top = await resolver.word_of_the_day()
            result = {"term": top.term, "count": top.count} if top else {}
    finally:
        await resolver.close()
    return result


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Resolve Tamil words across dictionary sources.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a word")
    resolve_parser.add_argument("query", help="Tamil word or romanised English text")
    resolve_parser.add_argument(
        "--mode",
        choices=[m.value for m in ResolutionMode],
        default=None,
        help="Override the configured resolution mode",
    )
    resolve_parser.add_argument(
        "--trace",
        action="store_true",
        default=False,
        help="Write a JSON trace of the resolution",
    )
    resolve_parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for trace files (default: from config)",
    )

    finalize_parser = subparsers.add_parser("finalize", help="Create or overwrite an entry")
    finalize_parser.add_argument("query", metavar="lemma", help="Headword to finalize")
    finalize_parser.add_argument(
        "--body",
        type=str,
        default=None,
        help="Entry body (default: an empty templated stub)",
    )

    subparsers.add_parser("word-of-the-day", help="Show the most searched word")

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            config=config_path,
            query=getattr(ns, "query", None),
            body=getattr(ns, "body", None),
            mode=getattr(ns, "mode", None),
            trace=getattr(ns, "trace", False),
            log_dir=getattr(ns, "log_dir", None),
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        result = asyncio.run(run(args))
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    print(json.dumps(result, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
