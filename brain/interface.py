from abc import ABC, abstractmethod

import numpy as np


class Transform(ABC):
    """Deterministic map from a fixed-width real vector to a fixed-width real vector."""

    @property
    @abstractmethod
    def input_width(self) -> int:
        pass

    @property
    @abstractmethod
    def output_width(self) -> int:
        pass

    @abstractmethod
    def feed(self, inputs: np.ndarray) -> np.ndarray:
        """
        Run one forward pass.
        Must not keep state between calls; the brain owns all recurrence.
        """
        pass
