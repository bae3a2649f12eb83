"""Loading reaction parameters from JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from kinexplorer.errors import InvalidParameterError
from kinexplorer.models import ReactionParameters


def load_parameters(config_file: str | Path) -> ReactionParameters:
    """Read a JSON object of parameters, e.g. ``{"temperature": 310, "order": "first"}``."""
    path = Path(config_file)
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except OSError as exc:
        raise InvalidParameterError(f"Cannot read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise InvalidParameterError(f"Config file {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidParameterError(f"Config file {path} must contain a JSON object")
    return ReactionParameters.from_mapping(data)
