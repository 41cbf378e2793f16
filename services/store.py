"""Generic record store: one ordered collection of one entity type.

The in-memory list is authoritative for the session; every mutation rewrites
the whole collection to its blob. Storage failures never propagate: a missing
or corrupt blob falls back to the schema's seed data, and a failed write is
logged and dropped.
"""
from __future__ import annotations

import copy
import csv
import io
import logging
from typing import Any, Dict, List, Optional

from domain.models import EntitySchema, Record, ValidationResult
from services import persistence
from utils.dates import advance_timestamp, parse_date, utc_now_iso
from utils.ids import enquiry_code, next_sequential_id, timestamp_id

logger = logging.getLogger(__name__)

_PROTECTED = ('id', 'createdAt', 'updatedAt')


def coerce_id(value: Any) -> Optional[int]:
    """Ids arrive from URLs as strings; anything non-integral matches nothing."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def _blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


class RecordStore:
    def __init__(self, schema: EntitySchema, autoload: bool = True):
        self.schema = schema
        self.records: List[Record] = []
        if autoload:
            self.load()

    # --- persistence ---

    def load(self) -> List[Record]:
        key = self.schema.storage_key
        try:
            stored = persistence.load_list(key)
        except persistence.PersistenceError as e:
            logger.warning("Error loading %s, using sample data: %s", key, e)
            stored = None
        self.records = stored if stored is not None else self.schema.seed()
        return self.records

    def save(self) -> bool:
        try:
            persistence.replace_all(self.schema.storage_key, self.records)
        except persistence.PersistenceError as e:
            logger.warning("Error saving %s: %s", self.schema.storage_key, e)
            return False
        return True

    # --- queries ---

    def list(self, filter_value: Optional[str] = None) -> List[Record]:
        if not filter_value:
            return self.records
        allowed = {v for v, _ in self.schema.filter_options}
        if filter_value not in allowed and self.schema.unknown_filter_matches_all:
            return self.records
        field = self.schema.filter_field
        return [r for r in self.records if r.get(field) == filter_value]

    def get(self, record_id: Any) -> Optional[Record]:
        rid = coerce_id(record_id)
        if rid is None:
            return None
        return next((r for r in self.records if r.get('id') == rid), None)

    def counts(self) -> Dict[str, int]:
        field = self.schema.filter_field
        return {v: sum(1 for r in self.records if r.get(field) == v)
                for v, _ in self.schema.filter_options}

    def _index(self, record_id: Any) -> int:
        rid = coerce_id(record_id)
        if rid is None:
            return -1
        return next((i for i, r in enumerate(self.records) if r.get('id') == rid), -1)

    # --- mutations ---

    def create(self, fields: Dict[str, Any]) -> Record:
        existing = [r.get('id') for r in self.records if isinstance(r.get('id'), int)]
        if self.schema.id_strategy == 'sequence':
            new_id = next_sequential_id(existing)
        else:
            new_id = timestamp_id(existing)
        now = utc_now_iso()
        record = copy.deepcopy(self.schema.defaults)
        record.update({k: v for k, v in fields.items() if k not in _PROTECTED})
        record['id'] = new_id
        if self.schema.id_strategy == 'sequence':
            record.setdefault('enquiryId', enquiry_code(new_id))
            record.setdefault('submissionDate', now)
        record['createdAt'] = now
        record['updatedAt'] = now
        self.records.insert(0, record)
        self.save()
        logger.debug("Created %s %s", self.schema.key, new_id)
        return record

    def update(self, record_id: Any, fields: Dict[str, Any]) -> Optional[Record]:
        idx = self._index(record_id)
        if idx == -1:
            return None
        record = self.records[idx]
        record.update({k: v for k, v in fields.items() if k not in _PROTECTED})
        record['updatedAt'] = advance_timestamp(record.get('updatedAt'))
        self.save()
        logger.debug("Updated %s %s", self.schema.key, record['id'])
        return record

    def delete(self, record_id: Any) -> bool:
        idx = self._index(record_id)
        if idx == -1:
            return False
        removed = self.records.pop(idx)
        self.save()
        logger.debug("Deleted %s %s", self.schema.key, removed.get('id'))
        return True

    def toggle_status(self, record_id: Any) -> Optional[Record]:
        if not self.schema.toggle:
            return None
        record = self.get(record_id)
        if record is None:
            return None
        on, off = self.schema.toggle
        record['status'] = off if record.get('status') == on else on
        record['updatedAt'] = advance_timestamp(record.get('updatedAt'))
        self.save()
        return record

    def mark_as_read(self, record_id: Any) -> Optional[Record]:
        if not self.schema.read_transition:
            return None
        record = self.get(record_id)
        if record is None:
            return None
        unread, read = self.schema.read_transition
        if record.get('status') == unread:
            record['status'] = read
            record['updatedAt'] = advance_timestamp(record.get('updatedAt'))
            self.save()
        return record

    def reset(self) -> List[Record]:
        """Replace the collection with the seed data and persist it."""
        self.records = self.schema.seed()
        self.save()
        return self.records

    # --- validation ---

    def validate(self, fields: Dict[str, Any]) -> ValidationResult:
        errors: List[str] = []
        for name, message in self.schema.required:
            if _blank(fields.get(name)):
                errors.append(message)

        rng = self.schema.date_range
        if rng is not None:
            start_raw, end_raw = fields.get(rng.start), fields.get(rng.end)
            if _blank(start_raw) or _blank(end_raw):
                errors.append(rng.missing_message)
            else:
                start, end = parse_date(start_raw), parse_date(end_raw)
                if start is None or end is None:
                    errors.append('Dates must use the YYYY-MM-DD format')
                elif start > end:
                    errors.append(rng.order_message)

        return ValidationResult(is_valid=not errors, errors=errors)

    # --- export ---

    def export_csv(self) -> str:
        """Exports the collection to a CSV string."""
        if not self.records:
            return ""
        output = io.StringIO()
        fieldnames = sorted({key for item in self.records for key in item.keys()})
        writer = csv.DictWriter(output, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(self.records)
        return output.getvalue()
