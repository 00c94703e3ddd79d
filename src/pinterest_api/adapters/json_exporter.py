"""JSON export of fetched objects.

Lets the CLI hand results to other tools without re-fetching them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from pinterest_api.core.domain.models import ApiObject


def export_objects_json(*, objects: Iterable[ApiObject], output_path: Path) -> Path:
    """Export domain objects as a UTF-8 JSON array with stable formatting."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [obj.model_dump(mode="json", exclude_none=True) for obj in objects]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
