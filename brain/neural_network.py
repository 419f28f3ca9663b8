"""
Feed-forward network built from a BrainGene.

Usage:
    network = NeuralNetwork(gene)
    outputs = network.feed(inputs)

Every layer is dense with a logistic activation, so outputs land in [0, 1],
the range the decision codecs expect.
"""

from typing import List, Tuple

import numpy as np

from genes.brain_gene import BrainGene
from model_contracts import assert_finite, assert_shape

from .interface import Transform


def sigmoid(x: np.ndarray) -> np.ndarray:
    # clip avoids overflow warnings in exp for large pre-activations
    return 1.0 / (1.0 + np.exp(-np.clip(x, -500.0, 500.0)))


class NeuralNetwork(Transform):
    def __init__(self, gene: BrainGene):
        gene.validate()
        self.gene = gene
        self.layer_sizes: Tuple[int, ...] = tuple(gene.layer_sizes)
        self.layers: List[Tuple[np.ndarray, np.ndarray]] = []
        for i, flat in enumerate(gene.weights):
            n_in = self.layer_sizes[i]
            n_out = self.layer_sizes[i + 1]
            params = np.asarray(flat, dtype=np.float64)
            assert_finite(params, name=f"layer {i} weights")
            weights = params[: n_out * n_in].reshape(n_out, n_in)
            biases = params[n_out * n_in :]
            self.layers.append((weights, biases))

    @property
    def input_width(self) -> int:
        return self.layer_sizes[0]

    @property
    def output_width(self) -> int:
        return self.layer_sizes[-1]

    def feed(self, inputs: np.ndarray) -> np.ndarray:
        activation = np.asarray(inputs, dtype=np.float64)
        assert_shape(activation, (self.input_width,), name="network input")
        for weights, biases in self.layers:
            activation = sigmoid(weights @ activation + biases)
        return activation

    def parameter_count(self) -> int:
        return sum(w.size + b.size for w, b in self.layers)
