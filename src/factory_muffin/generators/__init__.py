"""Generators – kind descriptor grammar and value strategies."""
from factory_muffin.generators.arrayparam import ArrayParam
from factory_muffin.generators.base import GenerationContext, Generator
from factory_muffin.generators.detect import parse_definition, parse_kind
from factory_muffin.generators.literal import Lazy, Literal
from factory_muffin.generators.model_ref import ModelRef
from factory_muffin.generators.provider import BareWord, ProviderCall

__all__ = [
    "ArrayParam",
    "BareWord",
    "GenerationContext",
    "Generator",
    "Lazy",
    "Literal",
    "ModelRef",
    "ProviderCall",
    "parse_definition",
    "parse_kind",
]
