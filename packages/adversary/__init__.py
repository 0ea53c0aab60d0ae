from .selector import Selection, select
from .session import AdversarialSession, MAX_TURNS

__all__ = ["Selection", "select", "AdversarialSession", "MAX_TURNS"]
