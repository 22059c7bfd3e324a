from __future__ import annotations
import random
from typing import Dict, List, Type

# ---- Global player registry ----
REGISTRY: Dict[str, Type["BasePlayer"]] = {}


def register(cls: Type["BasePlayer"]) -> Type["BasePlayer"]:
    """
    Decorator: @register on a player class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate player id: {pid}")
    REGISTRY[pid] = cls
    return cls


# ---- Base class that simulated players inherit ----
class BasePlayer:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.dictionary: List[str] = []
        self.rng = random.Random()

    def reset(self, *, dictionary: List[str], seed: int | None = None) -> None:
        self.dictionary = list(dictionary)
        if seed is not None:
            self.rng.seed(seed)

    def next_word(self, state: dict) -> str | None:
        """Return the next submission, or None to stop the round early."""
        raise NotImplementedError("Override in subclass")
