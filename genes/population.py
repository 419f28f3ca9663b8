from typing import Sequence

from core.rng import RNG

from .brain_gene import BrainGene


def generate_population(
    seed: int,
    n: int,
    input_width: int,
    output_width: int,
    hidden_layers: Sequence[int] = (),
    scale: float = 1.0,
) -> list[BrainGene]:
    """
    Generates a deterministic population of brain genes.
    Each gene draws from its own named stream, so gene i does not depend on n.
    """
    rng = RNG(seed=seed)
    population = []
    for i in range(n):
        gene_id = f"gene_{i:04d}"
        population.append(
            BrainGene.random(
                rng.stream(f"genes/{gene_id}"),
                gene_id=gene_id,
                input_width=input_width,
                output_width=output_width,
                hidden_layers=hidden_layers,
                scale=scale,
            )
        )
    return population
