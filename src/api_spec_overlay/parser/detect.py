"""Detect the serialization of a specification document."""

from pathlib import Path

from api_spec_overlay.errors import InputError

FORMAT_YAML = "yaml"
FORMAT_JSON = "json"

_EXTENSIONS = {
    ".yaml": FORMAT_YAML,
    ".yml": FORMAT_YAML,
    ".json": FORMAT_JSON,
}


def detect_format(file_path: Path | str) -> str:
    """Detect the format of a specification file from its extension.

    Returns: 'yaml' or 'json'.
    """
    ext = Path(file_path).suffix.lower()
    if ext not in _EXTENSIONS:
        raise InputError(f"unsupported file extension '{ext}' for {file_path}, expected .yaml, .yml or .json")
    return _EXTENSIONS[ext]
