"""Job configuration file.

The file is a YAML list of jobs::

    - specification: blog.yaml
      overlay_yaml: build/blog-overlay.yaml
      schema_json: build/schemas.json
"""

from pathlib import Path

import pydantic
import yaml
from pydantic import BaseModel, ConfigDict

from api_spec_overlay.errors import ConfigError

DEFAULT_CONFIG_FILES = ("apispec.yaml", "apispec.yml")

OUTPUT_KEYS = ("overlay_yaml", "overlay_json", "schema_json")


class Job(BaseModel):
    """One specification and the outputs to generate from it."""

    model_config = ConfigDict(extra="forbid")

    specification: str
    overlay_yaml: str | None = None
    overlay_json: str | None = None
    schema_json: str | None = None

    def outputs(self) -> dict[str, str]:
        """Requested outputs as {output key: path}."""
        return {key: getattr(self, key) for key in OUTPUT_KEYS if getattr(self, key)}


def find_default_config(directory: Path | None = None) -> Path | None:
    directory = directory or Path.cwd()
    for name in DEFAULT_CONFIG_FILES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path) -> list[Job]:
    """Read and check the job file at ``path``."""
    if not path.is_file():
        raise ConfigError(f"invalid config file: config file does not exist: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse config file: {e}") from e

    if not data:
        raise ConfigError("invalid config file: config file must contain at least one job")
    if not isinstance(data, list):
        raise ConfigError("invalid config file: expected a list of jobs")

    jobs = []
    for i, entry in enumerate(data, start=1):
        if not isinstance(entry, dict) or not entry.get("specification"):
            raise ConfigError(f"invalid config file: job {i} is missing required 'specification' field")
        try:
            job = Job.model_validate(entry)
        except pydantic.ValidationError as e:
            raise ConfigError(f"invalid config file: job {i}: {e}") from e
        if not job.outputs():
            raise ConfigError(
                f"invalid config file: job {i} must specify at least one output "
                f"({', '.join(OUTPUT_KEYS)})"
            )
        jobs.append(job)
    return jobs
