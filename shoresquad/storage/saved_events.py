"""Saved-event toggle set, persisted as a JSON list under one key."""

import json
import logging

from shoresquad.config.defaults import DEFAULT_SAVED_EVENTS_KEY
from shoresquad.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


class SavedEventSet:
    def __init__(self, store: KeyValueStore, key: str = DEFAULT_SAVED_EVENTS_KEY):
        self.store = store
        self.key = key

    def all(self) -> list[str]:
        """Saved event ids in the order they were saved."""
        raw = self.store.get(self.key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Discarding unparsable saved events under %s", self.key)
            return []
        if not isinstance(data, list):
            return []
        return [str(x) for x in data]

    def is_saved(self, event_id: str) -> bool:
        return event_id in self.all()

    def toggle(self, event_id: str) -> bool:
        """Add the id if absent, remove it if present. Returns the new saved state."""
        saved = self.all()
        if event_id in saved:
            saved.remove(event_id)
            now_saved = False
        else:
            saved.append(event_id)
            now_saved = True
        self.store.set(self.key, json.dumps(saved))
        return now_saved
