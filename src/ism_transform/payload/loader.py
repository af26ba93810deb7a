"""Read a backend payload document from disk."""

import json
from pathlib import Path

import yaml

from ism_transform.payload.validator import InvalidPayloadError


def load_payload(file_path: Path) -> dict:
    """Load a JSON or YAML payload file into a dict.

    JSON documents go through ``json.loads`` first: YAML 1.1 reads exponent
    floats such as ``5e-05`` as strings.
    """
    text = file_path.read_text(encoding="utf-8")

    data = None
    parsed = False
    if file_path.suffix.lower() == ".json" or text.lstrip().startswith(("{", "[")):
        try:
            data = json.loads(text)
            parsed = True
        except (json.JSONDecodeError, ValueError):
            pass

    if not parsed:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise InvalidPayloadError(f"{file_path} is neither valid JSON nor YAML: {e}") from e

    if not isinstance(data, dict):
        raise InvalidPayloadError(f"{file_path} does not contain a JSON object")
    return data
