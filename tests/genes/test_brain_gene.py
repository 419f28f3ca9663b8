import json

import pytest

from core.rng import RNGStream
from genes import BrainGene, generate_population


def make_gene(seed=5, gene_id="test_gene"):
    return BrainGene.random(RNGStream(seed=seed), gene_id, input_width=12, output_width=9, hidden_layers=(3,))


def test_brain_gene_serialization():
    """
    BrainGene survives a JSON round trip, tuples included.
    """
    gene = make_gene()
    json_str = gene.to_json()

    data = json.loads(json_str)
    assert data["gene_id"] == "test_gene"
    assert data["layer_sizes"] == [12, 3, 9]

    assert BrainGene.from_json(json_str) == gene


def test_brain_gene_fingerprint_stability():
    assert make_gene().fingerprint() == make_gene().fingerprint()
    assert BrainGene.from_json(make_gene().to_json()).fingerprint() == make_gene().fingerprint()


def test_brain_gene_fingerprint_uniqueness():
    base = make_gene()
    assert base.fingerprint() != make_gene(gene_id="other").fingerprint()
    assert base.fingerprint() != make_gene(seed=6).fingerprint()


def test_random_gene_shapes():
    gene = make_gene()
    assert gene.input_width == 12
    assert gene.output_width == 9
    assert [len(layer) for layer in gene.weights] == [12 * 3 + 3, 3 * 9 + 9]


@pytest.mark.parametrize(
    "layer_sizes, weights",
    [
        ((4,), ()),
        ((2, 0), ((),)),
        ((2, 1), ((1.0, 2.0),)),
        ((2, 1), ((1.0, 2.0, 3.0), (1.0,))),
    ],
)
def test_validate_rejects_inconsistent_genes(layer_sizes, weights):
    gene = BrainGene(gene_id="bad", version="1.0.0", layer_sizes=layer_sizes, weights=weights)
    with pytest.raises(ValueError):
        gene.validate()


def test_generate_population_is_deterministic_and_prefix_stable():
    small = generate_population(seed=9, n=3, input_width=12, output_width=9, hidden_layers=(4,))
    large = generate_population(seed=9, n=5, input_width=12, output_width=9, hidden_layers=(4,))
    assert small == large[:3]
    assert [g.gene_id for g in large] == [f"gene_{i:04d}" for i in range(5)]
    assert len({g.fingerprint() for g in large}) == 5


def test_generate_population_depends_on_seed():
    a = generate_population(seed=1, n=2, input_width=12, output_width=9)
    b = generate_population(seed=2, n=2, input_width=12, output_width=9)
    assert a[0].weights != b[0].weights
