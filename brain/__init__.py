# Brain module - perception/decision codecs around a gene-built network
from .contracts import FRESH, WARM, WidthMismatch
from .codecs import Bool, Codec, Composite, Float, HsvColor, Vector2, codec_layout
from .memory import Memory
from .perception import BodyPerception, EnvironmentPerception, Perception
from .decisions import Decisions
from .interface import Transform
from .neural_network import NeuralNetwork
from .brain import Brain
