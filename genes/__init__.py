from .brain_gene import BrainGene
from .population import generate_population
