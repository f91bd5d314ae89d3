"""Code generator entrypoint.

Loads a job file, builds the group of operations it describes and writes the
generated TypeScript file.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from clientgen.builder import ClientGroupBuilder
from clientgen.clients import CLIENT_BUILDERS
from clientgen.core.refs import RefResolutionError
from clientgen.lib.logging import configure_logging
from clientgen.lib.settings import get_settings
from clientgen.spec.loader import SpecValidationError, load_job

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate axios or SWR request functions")
    parser.add_argument("job", type=Path, help="Path to the job file (YAML or JSON)")
    parser.add_argument(
        "--output",
        type=Path,
        help="File to write (defaults to stdout)",
    )
    parser.add_argument(
        "--client",
        choices=sorted(CLIENT_BUILDERS),
        help="Client style (defaults to the job's output.client)",
    )
    parser.add_argument("--log-level", help="Override CLIENTGEN_LOG_LEVEL")
    return parser


def generate(job_file: Path, client: str | None = None) -> str:
    """Generate the file content for a job.

    Raises:
        SpecValidationError: If the job or its OpenAPI document is invalid
        RefResolutionError: If a parameter reference cannot be followed
    """
    loaded = load_job(job_file)
    job_client = client
    if job_client is None and "client" not in loaded.job.output.model_fields_set:
        job_client = get_settings().default_client
    builder = ClientGroupBuilder(loaded.context, job_client)
    return builder.build(loaded.job.title, loaded.operations).render()


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        content = generate(args.job, args.client)
    except (SpecValidationError, RefResolutionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(content)
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(content, encoding="utf-8")
    logger.info("Wrote %s", args.output)
    print(f"  ✓ {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
