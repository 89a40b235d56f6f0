"""Command-line entry point: prompt-as-code run [options]."""

import argparse
import asyncio
import logging
import sys

from prompt_as_code import __version__
from prompt_as_code.config import get_settings
from prompt_as_code.exceptions import HarnessError
from prompt_as_code.reporters import REPORTER_REGISTRY, get_reporter
from prompt_as_code.services.execution import GenerationDefaults
from prompt_as_code.services.invoker import ClientInvoker, get_client_for_model, require_api_key
from prompt_as_code.services.runner import PromptRunner, RunnerConfig

logger = logging.getLogger("prompt_as_code")


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="prompt-as-code",
        description="Run versioned prompts against test samples",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Execute prompts against sample data")
    run.add_argument("--prompt-dir", default=settings.prompt_dir, help="Directory containing prompt YAML files")
    run.add_argument("--samples-dir", default=settings.samples_dir, help="Directory containing sample JSON files")
    run.add_argument("--model", default=None, help="Override model (gpt-4o, claude-sonnet-4-20250514, llama3.1, ...)")
    run.add_argument(
        "--output",
        default="console",
        choices=sorted(REPORTER_REGISTRY),
        help="Output format",
    )
    run.add_argument("--output-file", default=None, help="Write the JSON report to this file instead of stdout")
    run.add_argument("--filter", dest="name_filter", default=None, help="Run specific prompt by name")
    run.add_argument("--api-key", default=None, help="OpenAI API key (or use OPENAI_API_KEY env var)")
    run.add_argument(
        "--log-level",
        default="DEBUG" if settings.debug else settings.log_level,
        help="Logging level for progress output (DEBUG when DEBUG=true)",
    )

    return parser


def configure_logging(level: str) -> None:
    # Logs go to stderr so JSON on stdout stays parseable
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


async def _run(args: argparse.Namespace) -> int:
    settings = get_settings()
    defaults = GenerationDefaults.from_settings(settings)

    # Fail before discovery when the override model can never be reached
    if args.model:
        require_api_key(args.model, settings, args.api_key)

    def client_factory(model_id: str):
        # Raised here, a missing key is recorded on each affected case
        require_api_key(model_id, settings, args.api_key)
        return get_client_for_model(model_id, settings=settings, openai_api_key=args.api_key)

    invoker = ClientInvoker(client_factory)
    reporter = get_reporter(args.output, output_path=args.output_file)
    runner = PromptRunner(
        RunnerConfig(
            prompt_dir=args.prompt_dir,
            samples_dir=args.samples_dir,
            model_override=args.model,
            name_filter=args.name_filter,
            defaults=defaults,
        ),
        invoke=invoker,
        reporter=reporter,
    )

    outcome = await runner.run()
    return 1 if outcome.has_failures else 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        return asyncio.run(_run(args))
    except (HarnessError, OSError) as e:
        # OSError: e.g. --output-file in an unwritable location
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
