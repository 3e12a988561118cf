"""Run configured jobs: write outputs to disk or compare them with it."""

import logging
from pathlib import Path

from api_spec_overlay.config import Job
from api_spec_overlay.parser.base import Service
from api_spec_overlay.parser.detect import FORMAT_JSON, FORMAT_YAML
from api_spec_overlay.parser.document import dump_service
from api_spec_overlay.parser.loader import parse_service_from_file
from api_spec_overlay.schemas import generate_schemas_json

logger = logging.getLogger(__name__)

DIFF_CONTEXT_LINES = 3


def render_output(key: str, service: Service) -> str:
    if key == "overlay_yaml":
        return dump_service(service, FORMAT_YAML)
    if key == "overlay_json":
        return dump_service(service, FORMAT_JSON)
    return generate_schemas_json()


def render_job(job: Job, base_dir: Path) -> dict[Path, str]:
    """Generated content per output path, resolved against ``base_dir``."""
    service = parse_service_from_file(base_dir / job.specification)
    return {base_dir / path: render_output(key, service) for key, path in job.outputs().items()}


def run_jobs(jobs: list[Job], base_dir: Path) -> list[Path]:
    """Generate every job's outputs and return the written paths."""
    written = []
    for i, job in enumerate(jobs, start=1):
        logger.info("Processing job %d: %s", i, job.specification)
        for path, content in render_job(job, base_dir).items():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            logger.info("Wrote %s", path)
            written.append(path)
    return written


def first_difference(generated: list[str], on_disk: list[str]) -> int | None:
    """Index of the first differing line, or None when equal."""
    for i, (a, b) in enumerate(zip(generated, on_disk)):
        if a != b:
            return i
    if len(generated) != len(on_disk):
        return min(len(generated), len(on_disk))
    return None


def describe_difference(generated: str, on_disk: str) -> str:
    gen_lines = generated.splitlines()
    disk_lines = on_disk.splitlines()
    index = first_difference(gen_lines, disk_lines)
    if index is None:
        return ""

    start = max(0, index - DIFF_CONTEXT_LINES)
    end = index + DIFF_CONTEXT_LINES + 1
    out = [f"first difference at line {index + 1}", "generated:"]
    for n in range(start, min(end, len(gen_lines))):
        marker = "> " if n == index else "  "
        out.append(f"{marker}{n + 1}: {gen_lines[n]}")
    out.append("on disk:")
    for n in range(start, min(end, len(disk_lines))):
        marker = "> " if n == index else "  "
        out.append(f"{marker}{n + 1}: {disk_lines[n]}")
    return "\n".join(out)


def diff_jobs(jobs: list[Job], base_dir: Path) -> list[str]:
    """Human-readable descriptions of outputs that differ from the files on disk."""
    differences = []
    for i, job in enumerate(jobs, start=1):
        logger.info("Checking job %d: %s", i, job.specification)
        for path, content in render_job(job, base_dir).items():
            if not path.is_file():
                differences.append(f"{path}: file does not exist")
                continue
            detail = describe_difference(content, path.read_text(encoding="utf-8"))
            if detail:
                differences.append(f"{path}: {detail}")
    return differences
