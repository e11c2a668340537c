"""Example synthesis exports."""

from .example_synthesizer import ABSENT, MAP_EXAMPLE_KEY, ExampleSynthesizer
from .scalar_defaults import SCALAR_DEFAULTS, synthesize_scalar

__all__ = [
    "ABSENT",
    "MAP_EXAMPLE_KEY",
    "ExampleSynthesizer",
    "SCALAR_DEFAULTS",
    "synthesize_scalar",
]
