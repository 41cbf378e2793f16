"""Construction of the per-panel store/controller pairs."""
from typing import Dict, Iterable, Optional

from domain.entities import SCHEMAS
from domain.models import EntitySchema
from services.controller import ViewController
from services.store import RecordStore


def build_controllers(schemas: Optional[Iterable[EntitySchema]] = None) -> Dict[str, ViewController]:
    """One store + controller per entity, keyed by schema key."""
    schemas = list(schemas) if schemas is not None else list(SCHEMAS.values())
    return {s.key: ViewController(RecordStore(s)) for s in schemas}
