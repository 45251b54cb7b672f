# tixhub/core/consolidate_events.py
from __future__ import annotations

from typing import Dict, Iterable, List

from tixhub.core.models import Event


def consolidate_events(*batches: Iterable[Event]) -> List[Event]:
    """
    Aplatit les lots (un par ville) puis dédoublonne par id.
    - En cas de doublon, le dernier vu gagne mais garde la place du premier.
    - L'ordre de sortie suit donc l'ordre des lots : déterministe.
    """
    by_id: Dict[str, Event] = {}
    for batch in batches:
        for ev in (batch or []):
            by_id[ev.id] = ev
    return list(by_id.values())
