# src/bytesift/settings.py
"""
Process-wide tunables for the search loop and the shrinker.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Budgets and entropy configuration for one property check."""

    max_examples: int = 100
    """Number of fresh generate-mode executions the search loop may run
    before declaring that the property holds. Defaults to 100.

    """

    max_shrinks: int = 200
    """Number of candidate replays the shrinker may spend. Every attempt
    counts, whether or not it is accepted. Defaults to 200.

    """

    seed: Optional[int] = None
    """Seed for the entropy source. ``None`` draws fresh OS entropy, so two
    runs are not expected to agree. Counterexamples are reproducible from
    their own byte stream either way.

    """

    def __post_init__(self):
        if self.max_examples < 0:
            raise ValueError("max_examples must be non-negative")
        if self.max_shrinks < 0:
            raise ValueError("max_shrinks must be non-negative")

    def rng(self) -> np.random.Generator:
        """Build the entropy source described by these settings."""
        return np.random.default_rng(self.seed)


default_settings = Settings()
