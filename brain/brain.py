"""One creature's brain: encode -> transform -> decode, with memory feedback."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import numpy as np

from genes.brain_gene import BrainGene

from .contracts import FRESH, WARM, WidthMismatch, check_width
from .decisions import Decisions
from .interface import Transform
from .memory import Memory
from .neural_network import NeuralNetwork
from .perception import Perception

NetworkFactory = Callable[[BrainGene], Transform]


class Brain:
    """Owns a gene-built transform and the memory it feeds back to itself.

    ``think`` mutates the brain's memory and must not be called concurrently
    on the same instance. Distinct brains share nothing and may think in
    parallel.
    """

    def __init__(self, gene: BrainGene, *, network_factory: NetworkFactory = NeuralNetwork) -> None:
        self.gene = gene
        self.network = network_factory(gene)
        if self.network.input_width != Perception.input_width():
            raise WidthMismatch("transform input", Perception.input_width(), self.network.input_width)
        if self.network.output_width != Decisions.output_width():
            raise WidthMismatch("transform output", Decisions.output_width(), self.network.output_width)
        self._memory: Optional[Memory] = None
        self.think_count = 0

    @property
    def memory(self) -> Optional[Memory]:
        """Memory written by the last successful think, None while FRESH."""
        return self._memory

    @property
    def state(self) -> str:
        return FRESH if self.memory is None else WARM

    def think(self, perception: Perception) -> Decisions:
        """Decide from the caller's body/environment perception.

        The memory slot of ``perception`` is replaced by this brain's previous
        memory (zeros on the first call). A width mismatch aborts the call
        before memory is touched.
        """
        memory = self.memory if self.memory is not None else Memory.zeros()
        inputs = perception.with_memory(memory).encode()
        check_width("transform input", inputs, self.network.input_width)

        outputs = self.network.feed(np.asarray(inputs, dtype=np.float64))
        check_width("transform output", outputs, Decisions.output_width())

        decisions = Decisions.decode(outputs)
        self._memory = decisions.memory
        self.think_count += 1
        return decisions

    def reset(self) -> None:
        self._memory = None
        self.think_count = 0

    def get_diagnostics(self) -> Dict[str, Any]:
        return {
            "state": self.state,
            "memory": list(self.memory.values) if self.memory is not None else None,
            "think_count": self.think_count,
            "gene_fingerprint": self.gene.fingerprint(),
        }


__all__ = ["Brain", "NetworkFactory"]
