"""View controller: URL state -> view models, user events -> store mutations.

Nothing here touches Streamlit; the views render the returned models and
surface ActionResult messages as toasts.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from domain.models import FieldSpec, Record
from services.store import RecordStore, coerce_id
from utils.dates import today_iso

LIST = 'list'
FORM = 'form'


@dataclass
class ViewState:
    mode: str
    action: Optional[str] = None
    record_id: Optional[int] = None
    filter_value: Optional[str] = None


@dataclass
class FilterButton:
    value: Optional[str]
    label: str
    count: int
    active: bool


@dataclass
class CardViewModel:
    id: int
    title: str
    tag: Optional[str]
    status: Optional[str]
    status_label: Optional[str]
    meta: List[Tuple[str, str]]
    excerpt: str = ''
    toggle_label: Optional[str] = None
    can_mark_read: bool = False


@dataclass
class ListViewModel:
    title: str
    subtitle: str
    filters: List[FilterButton]
    cards: List[CardViewModel]
    empty_message: str
    add_label: Optional[str]


@dataclass
class FormViewModel:
    action: str
    record_id: Optional[int]
    title: str
    submit_label: str
    fields: List[FieldSpec]
    values: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ActionResult:
    ok: bool
    message: str
    level: str = 'info'  # success | error | warning | info
    record: Optional[Record] = None


def _first(params: Mapping[str, Any], name: str) -> Optional[str]:
    value = params.get(name)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _to_int(value: Any, default: int) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


class ViewController:
    def __init__(self, store: RecordStore):
        self.store = store
        self.schema = store.schema
        self.current_filter: Optional[str] = None

    # --- routing ---

    def resolve(self, params: Mapping[str, Any]) -> ViewState:
        """Map query params (action, id, filter) to a view."""
        action = _first(params, 'action')
        filter_value = _first(params, 'filter')
        if filter_value in ('null', 'None'):
            filter_value = None
        self.current_filter = filter_value

        if action == 'create' and self.schema.can_create:
            return ViewState(FORM, 'create', None, filter_value)
        if action == 'edit':
            record_id = coerce_id(_first(params, 'id'))
            if record_id is not None and self.store.get(record_id) is not None:
                return ViewState(FORM, 'edit', record_id, filter_value)
        return ViewState(LIST, None, None, filter_value)

    def list_params(self, filter_value: Optional[str] = None) -> Dict[str, str]:
        return {'filter': filter_value} if filter_value else {}

    def form_params(self, action: str, record_id: Optional[int] = None) -> Dict[str, str]:
        params = {'action': action}
        if record_id is not None:
            params['id'] = str(record_id)
        if self.current_filter:
            params['filter'] = self.current_filter
        return params

    # --- view models ---

    def list_view(self, filter_value: Optional[str] = None) -> ListViewModel:
        schema = self.schema
        records = self.store.list(filter_value)
        allowed = {v for v, _ in schema.filter_options}
        active = filter_value if filter_value in allowed else None
        counts = self.store.counts()
        filters = [FilterButton(None, 'All', len(self.store.records), active is None)]
        filters.extend(FilterButton(v, label, counts.get(v, 0), active == v)
                       for v, label in schema.filter_options)
        empty = schema.empty_message
        if active:
            empty = f"Try changing your filter or {empty}"
        return ListViewModel(
            title=schema.filter_title(active),
            subtitle=schema.count_label(len(records)),
            filters=filters,
            cards=[self.card(r) for r in records],
            empty_message=empty[0].upper() + empty[1:],
            add_label=f"Add {schema.singular}" if schema.can_create else None,
        )

    def card(self, record: Record) -> CardViewModel:
        schema = self.schema
        tag = status = status_label = None
        if schema.tag:
            tag_field, tag_options = schema.tag
            tag = next((label for v, label in tag_options if v == record.get(tag_field)), None)
        if schema.status:
            status_field, status_options = schema.status
            status = record.get(status_field)
            status_label = next((label for v, label in status_options if v == status), status)
        toggle_label = None
        if schema.toggle:
            when_on, when_off = schema.toggle_labels
            toggle_label = when_on if status == schema.toggle[0] else when_off
        excerpt = str(record.get(schema.excerpt_field) or '') if schema.excerpt_field else ''
        if len(excerpt) > 140:
            excerpt = excerpt[:140] + '...'
        return CardViewModel(
            id=record.get('id'),
            title=str(record.get(schema.title_field) or 'Untitled'),
            tag=tag,
            status=status,
            status_label=status_label,
            meta=[(label, fn(record)) for label, fn in schema.card_meta],
            excerpt=excerpt,
            toggle_label=toggle_label,
            can_mark_read=bool(schema.read_transition) and status == schema.read_transition[0],
        )

    def form_view(self, action: str, record_id: Any = None) -> Optional[FormViewModel]:
        """Form model for create/edit; None when editing a record that no longer exists."""
        schema = self.schema
        if action == 'edit':
            record = self.store.get(record_id)
            if record is None:
                return None
            values = dict(record)
        else:
            values = dict(schema.defaults)
            if schema.date_range:
                values.setdefault(schema.date_range.start, today_iso())
                values.setdefault(schema.date_range.end, today_iso(1))
        for spec in schema.form_fields:
            if spec.to_form is not None:
                values[spec.name] = spec.to_form(values.get(spec.name))
        verb = 'Create' if action == 'create' else 'Update'
        return FormViewModel(
            action=action,
            record_id=coerce_id(record_id) if action == 'edit' else None,
            title=f"{'Add New' if action == 'create' else 'Edit'} {schema.singular}",
            submit_label=f"{verb} {schema.singular}",
            fields=list(schema.form_fields),
            values=values,
        )

    def collect(self, raw: Mapping[str, Any]) -> Dict[str, Any]:
        """Convert widget values to stored values."""
        fields: Dict[str, Any] = {}
        for spec in self.schema.form_fields:
            if spec.name not in raw:
                continue
            value = raw[spec.name]
            if spec.from_form is not None:
                value = spec.from_form(value)
            elif spec.kind == 'date':
                value = value.isoformat() if hasattr(value, 'isoformat') else (value or None)
            elif spec.kind == 'number' or spec.name == 'priority':
                value = _to_int(value, 1 if spec.name == 'priority' else 0)
            elif spec.kind == 'checkbox':
                value = bool(value)
            elif isinstance(value, str):
                value = value.strip()
            fields[spec.name] = value
        return fields

    # --- events ---

    def submit(self, action: str, record_id: Any, fields: Dict[str, Any]) -> ActionResult:
        noun = self.schema.singular
        validation = self.store.validate(fields)
        if not validation.is_valid:
            return ActionResult(False, validation.first_error, 'error')
        if action == 'create':
            record = self.store.create(fields)
            return ActionResult(True, f"{noun} created successfully!", 'success', record)
        record = self.store.update(record_id, fields)
        if record is None:
            return ActionResult(False, f"{noun} not found", 'error')
        return ActionResult(True, f"{noun} updated successfully!", 'success', record)

    def delete(self, record_id: Any) -> ActionResult:
        if self.store.delete(record_id):
            return ActionResult(True, f"{self.schema.singular} deleted successfully", 'success')
        return ActionResult(False, f"{self.schema.singular} not found", 'error')

    def toggle_status(self, record_id: Any) -> ActionResult:
        record = self.store.toggle_status(record_id)
        if record is None:
            return ActionResult(False, f"{self.schema.singular} not found", 'error')
        message = self.schema.toggle_messages.get(record.get('status'), 'Status updated')
        return ActionResult(True, message, 'success', record)

    def mark_as_read(self, record_id: Any) -> ActionResult:
        record = self.store.mark_as_read(record_id)
        if record is None:
            return ActionResult(False, f"{self.schema.singular} not found", 'error')
        return ActionResult(True, f"{self.schema.singular} marked as {self.schema.read_transition[1]}", 'success', record)

    def reset(self) -> ActionResult:
        self.store.reset()
        return ActionResult(True, f"{self.schema.plural} reset to sample data", 'warning')
