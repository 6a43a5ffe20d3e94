from __future__ import annotations

# Public API of intentions package:
#  • get_intentions_for_path — lazy retrieval of intention classes by path
#  • BaseIntention / IntentionOutcome / Priority — the trigger interface
from .base import BaseIntention, IntentionOutcome, Priority
from .registry import get_intentions_for_path, list_intentions, register_lazy

__all__ = [
    "BaseIntention",
    "IntentionOutcome",
    "Priority",
    "get_intentions_for_path",
    "list_intentions",
    "register_lazy",
]

# ---- Lightweight (lazy) registration of built-in intentions ------------------
# Only module:class strings here; the module is imported on first request.

register_lazy(module=".store_by_owner", class_name="StoreByOwnerPropertyIntention", extensions=[".kt"])
