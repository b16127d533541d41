"""
Operations Layer

Business logic composed over the match store:
- Database layer: pure data access (MatchStore)
- Operations layer: authorization, validation and write serialization
- Command layer: Discord integration and user interface

Modules:
- MatchRegistry: match registration, outcome transitions and queries
- WriterAuthorization: single-owner write privilege
- seeding: bulk registration of fixtures
"""

from .authorization import WriterAuthorization
from .match_registry import MatchRegistry

__all__ = ['WriterAuthorization', 'MatchRegistry']
