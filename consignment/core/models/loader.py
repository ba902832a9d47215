"""
Build ConsignmentRecord instances from YAML or JSON documents.

Accepted document shapes:
```yaml
consignments:
  - direction: outbound
    who_pays: abc
    cost_centre: cc1
    sender: {business_name: Acme}
    receiver: {business_name: Globex}
    contact_methods:
      - {kind: phone, value: "12345"}
```
or a single record mapping at the top level.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from consignment.core.exceptions import RecordLoadError
from .consignment_record import ConsignmentRecord

YAML_SUFFIXES = {".yaml", ".yml"}


def parse_records(document: Any, source: str = "<document>") -> list[ConsignmentRecord]:
    """
    Turn a parsed document into consignment records.

    Args:
        document: Parsed YAML/JSON content
        source: Name used in error messages

    Returns:
        Records in document order

    Raises:
        RecordLoadError: If the document shape or any record is invalid
    """
    if isinstance(document, dict) and "consignments" in document:
        entries = document["consignments"]
    elif isinstance(document, dict):
        entries = [document]
    else:
        entries = document

    if not isinstance(entries, list):
        raise RecordLoadError(source, "expected a record mapping or a 'consignments' list")

    records = []
    for idx, entry in enumerate(entries):
        try:
            records.append(ConsignmentRecord.model_validate(entry))
        except ValidationError as e:
            raise RecordLoadError(source, f"record {idx} is invalid: {e}") from e

    return records


def load_records(path: str | Path) -> list[ConsignmentRecord]:
    """
    Load consignment records from a YAML (.yaml/.yml) or JSON file.

    Raises:
        RecordLoadError: If the file is missing, unreadable, unparseable or holds invalid records
    """
    path = Path(path)
    if not path.exists():
        raise RecordLoadError(str(path), "file not found")

    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                document = yaml.safe_load(f)
            else:
                document = json.load(f)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RecordLoadError(str(path), f"cannot parse: {e}") from e
    except OSError as e:
        raise RecordLoadError(str(path), f"cannot read: {e}") from e

    return parse_records(document, source=str(path))
