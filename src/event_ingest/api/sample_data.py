"""Canned results served by the read path, keyed by entity type."""
from typing import Any, Dict, List, Optional

SAMPLE_RESULTS: Dict[str, List[Dict[str, Any]]] = {
    "events": [
        {"id": "event-1", "title": "Jazz Night", "location": "Blue Room", "date": "2025-03-14"},
        {"id": "event-2", "title": "Farmers Market", "location": "Town Square", "date": "2025-03-16"},
    ],
    "places": [
        {"id": "place-1", "name": "Blue Room", "category": "venue"},
        {"id": "place-2", "name": "Town Square", "category": "outdoor"},
    ],
    "users": [
        {"id": "user-1", "username": "alice"},
        {"id": "user-2", "username": "bob"},
    ],
    "posts": [
        {"id": "post-1", "author": "user-1", "text": "See you at Jazz Night!"},
    ],
}


def lookup(entity_type: str) -> Optional[List[Dict[str, Any]]]:
    """Return the canned results for ``entity_type``, or None if unknown."""
    results = SAMPLE_RESULTS.get(entity_type.lower())
    if results is None:
        return None
    return [dict(result) for result in results]
