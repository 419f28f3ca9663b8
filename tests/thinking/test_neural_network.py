import math

import numpy as np
import pytest

from brain import NeuralNetwork
from core.rng import RNGStream
from genes.brain_gene import BrainGene


def make_gene(hidden=(6,), seed=3):
    return BrainGene.random(RNGStream(seed=seed), "nn", input_width=12, output_width=9, hidden_layers=hidden)


def test_network_widths_follow_gene():
    network = NeuralNetwork(make_gene(hidden=(6, 4)))
    assert network.input_width == 12
    assert network.output_width == 9
    assert network.parameter_count() == (12 * 6 + 6) + (6 * 4 + 4) + (4 * 9 + 9)


def test_feed_is_deterministic_and_bounded():
    network = NeuralNetwork(make_gene())
    inputs = np.linspace(-3.0, 3.0, 12)
    first = network.feed(inputs)
    second = network.feed(inputs)
    assert first.shape == (9,)
    assert np.array_equal(first, second)
    assert np.all((first >= 0.0) & (first <= 1.0))


def test_feed_handles_extreme_inputs_without_nan():
    network = NeuralNetwork(make_gene())
    out = network.feed(np.full(12, 1e6))
    assert np.all(np.isfinite(out))


def test_feed_rejects_wrong_input_shape():
    network = NeuralNetwork(make_gene())
    with pytest.raises(ValueError):
        network.feed(np.zeros(11))


def test_single_layer_matches_manual_sigmoid():
    gene = BrainGene(
        gene_id="tiny",
        version="1.0.0",
        layer_sizes=(2, 1),
        weights=((1.0, -2.0, 0.5),),
    )
    out = NeuralNetwork(gene).feed(np.array([1.0, 1.0]))
    expected = 1.0 / (1.0 + math.exp(-(1.0 - 2.0 + 0.5)))
    assert out[0] == pytest.approx(expected)


def test_non_finite_weights_are_rejected():
    gene = BrainGene(gene_id="bad", version="1.0.0", layer_sizes=(1, 1), weights=((float("nan"), 0.0),))
    with pytest.raises(ValueError):
        NeuralNetwork(gene)
