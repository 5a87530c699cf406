import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from claimcheck.adjudication.exceptions import AdjudicationError
from claimcheck.claims.models import ClaimContext
from claimcheck.config.settings import Settings
from claimcheck.database.connection import close_pool, init_pool
from claimcheck.documents.models import RawUpload
from claimcheck.logging.logger import Log
from claimcheck.pipeline.exceptions import PipelineError
from claimcheck.pipeline.runner import ClaimRun, build_claim_run


def parse_upload(argument: str) -> RawUpload:
    """Parse ``path[:category]`` into a RawUpload read from disk."""
    path_part, sep, category = argument.rpartition(":")
    if not sep or not path_part:
        path_part, category = argument, ""
    path = Path(path_part)
    return RawUpload(filename=path.name, path=path, category=category or None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="claimcheck",
        description="Validate claim documents and derive the claim status.",
    )
    parser.add_argument("context", type=Path, help="JSON file with patientInfo/providerDetails/diagnosis")
    parser.add_argument("files", nargs="+", help="document path, optionally suffixed with :category")
    parser.add_argument(
        "--adjudicate",
        action="store_true",
        help="hand the validated claim to the adjudication workflow",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> pool -> claim run -> optional hand-off."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    claim = ClaimContext.from_dict(json.loads(args.context.read_text(encoding="utf-8")))
    uploads = [parse_upload(item) for item in args.files]

    init_pool(settings)
    try:
        claim_run = build_claim_run(settings, claim, uploads)
        try:
            return _execute(claim_run, args.adjudicate)
        finally:
            claim_run.close()
    finally:
        close_pool()


def _execute(claim_run: ClaimRun, adjudicate: bool) -> int:
    """Run the pipeline, print the JSON report and optionally hand off."""
    context = claim_run.run()
    if context.assessment is None:
        raise PipelineError("Claim run finished without an assessment")
    report: dict[str, object] = {
        "status": context.assessment.status.value,
        "classifications": [asdict(c) for c in context.assessment.classifications],
        "validationResults": [o.to_dict() for o in context.outcomes],
    }
    if adjudicate:
        try:
            report["adjudication"] = asdict(claim_run.adjudicate())
        except AdjudicationError as exc:
            Log.error(f"Adjudication failed: {exc}")
            print(f"Adjudication failed: {exc}", file=sys.stderr)
            return 1
    print(json.dumps(report, indent=2, ensure_ascii=False, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
