"""
Fuzzy Search

Search in-memory records while tolerating spelling mistakes. Every word in the
configured fields of each record is compared with the search terms using a
bounded Damerau-Levenshtein distance; records are ranked by their best word.

Main entry points:
    find(phrase, relevance): start a fluent Query
    Engine: several named collections searched in one call

Example Usage:
    from fuzzysearch import find

    people = [{"name": "John Smith"}, {"name": "Jon Smyth"}, {"name": "Alice"}]
    hits = find("john", relevance=80).data(people).fields("name").execute()
    # {0: {"name": "John Smith"}, 1: {"name": "Jon Smyth"}}
"""

# src/fuzzysearch/__init__.py
from .distance import edit_distance
from .engine import Engine
from .errors import InvalidInput, SearchError
from .models import EngineHit, QueryConfig, SearchHit
from .query import Query, find
from .relevance import CostModel, cost_limit

__version__ = "1.0.0"
__all__ = [
    "CostModel",
    "Engine",
    "EngineHit",
    "InvalidInput",
    "Query",
    "QueryConfig",
    "SearchError",
    "SearchHit",
    "cost_limit",
    "edit_distance",
    "find",
]
