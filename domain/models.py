from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

Record = Dict[str, Any]
Options = Sequence[Tuple[Any, str]]


@dataclass(frozen=True)
class FieldSpec:
    """One input on a create/edit form.

    kind: text | textarea | select | multiselect | radio | date | number | checkbox
    to_form / from_form convert between the stored value and the widget value
    (e.g. compliance entries <-> "Title: description" lines).
    """
    name: str
    label: str
    kind: str = 'text'
    options: Optional[Options] = None
    required: bool = False
    help: Optional[str] = None
    to_form: Optional[Callable[[Any], Any]] = None
    from_form: Optional[Callable[[Any], Any]] = None


@dataclass(frozen=True)
class DateRange:
    start: str
    end: str
    missing_message: str = 'Start and end dates are required'
    order_message: str = 'End date must be after start date'


@dataclass(frozen=True)
class EntitySchema:
    key: str
    storage_key: str
    singular: str
    plural: str
    title: str
    filter_field: str
    filter_options: Options
    filter_titles: Dict[str, str]
    required: List[Tuple[str, str]]
    seed: Callable[[], List[Record]]
    form_fields: List[FieldSpec]
    defaults: Record = field(default_factory=dict)
    date_range: Optional[DateRange] = None
    id_strategy: str = 'timestamp'  # timestamp | sequence
    toggle: Optional[Tuple[str, str]] = None  # (on, off) values of the status field
    toggle_messages: Dict[str, str] = field(default_factory=dict)
    toggle_labels: Tuple[str, str] = ('Deactivate', 'Activate')  # (when on, otherwise)
    read_transition: Optional[Tuple[str, str]] = None  # (unread, read) values of the status field
    unknown_filter_matches_all: bool = True
    title_field: str = 'title'
    tag: Optional[Tuple[str, Options]] = None
    status: Optional[Tuple[str, Options]] = None
    card_meta: List[Tuple[str, Callable[[Record], str]]] = field(default_factory=list)
    excerpt_field: Optional[str] = None
    empty_message: str = 'create your first record to get started'
    can_create: bool = True

    def filter_title(self, value: Optional[str]) -> str:
        return self.filter_titles.get(value or '', self.title)

    def count_label(self, n: int) -> str:
        return f"{n} {self.singular_noun if n == 1 else self.plural_noun} found"

    @property
    def singular_noun(self) -> str:
        return self.singular.lower()

    @property
    def plural_noun(self) -> str:
        return self.plural.lower()


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)

    @property
    def first_error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None
