import json
import hashlib
from dataclasses import dataclass, asdict
from typing import Sequence, Tuple

from core.rng import RNGStream


@dataclass(frozen=True)
class BrainGene:
    """Genetic descriptor of a feed-forward brain.

    ``weights[i]`` holds layer ``i`` as the flat row-major (out, in) matrix
    followed by its ``out`` biases.
    """

    gene_id: str
    version: str
    layer_sizes: Tuple[int, ...]
    weights: Tuple[Tuple[float, ...], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "layer_sizes", tuple(int(n) for n in self.layer_sizes))
        object.__setattr__(self, "weights", tuple(tuple(float(w) for w in layer) for layer in self.weights))

    @property
    def input_width(self) -> int:
        return self.layer_sizes[0]

    @property
    def output_width(self) -> int:
        return self.layer_sizes[-1]

    def validate(self) -> None:
        if len(self.layer_sizes) < 2:
            raise ValueError(f"layer_sizes needs at least input and output, got {self.layer_sizes}")
        if any(n <= 0 for n in self.layer_sizes):
            raise ValueError(f"layer sizes must be positive, got {self.layer_sizes}")
        if len(self.weights) != len(self.layer_sizes) - 1:
            raise ValueError(
                f"expected {len(self.layer_sizes) - 1} weight layers, got {len(self.weights)}"
            )
        for i, layer in enumerate(self.weights):
            n_in, n_out = self.layer_sizes[i], self.layer_sizes[i + 1]
            expected = n_out * n_in + n_out
            if len(layer) != expected:
                raise ValueError(f"layer {i} needs {expected} parameters, got {len(layer)}")

    def to_json(self) -> str:
        return json.dumps(asdict(self), sort_keys=True, separators=(",", ":"))

    @staticmethod
    def from_json(json_str: str) -> "BrainGene":
        data = json.loads(json_str)
        return BrainGene(**data)

    def fingerprint(self) -> str:
        canonical_json = self.to_json()
        return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()

    @staticmethod
    def random(
        stream: RNGStream,
        gene_id: str,
        input_width: int,
        output_width: int,
        hidden_layers: Sequence[int] = (),
        *,
        version: str = "1.0.0",
        scale: float = 1.0,
    ) -> "BrainGene":
        """Draw gaussian weights from ``stream``; same stream state, same gene."""
        sizes = (input_width, *hidden_layers, output_width)
        weights = []
        for n_in, n_out in zip(sizes, sizes[1:]):
            weights.append(tuple(stream.gauss(0.0, scale) for _ in range(n_out * n_in + n_out)))
        gene = BrainGene(gene_id=gene_id, version=version, layer_sizes=sizes, weights=tuple(weights))
        gene.validate()
        return gene
