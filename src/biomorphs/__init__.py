"""Evolvable L-system biomorphs: generation, mutation, expansion and drawing."""

from biomorphs.decoders.l_system_decoding import LSystemDecoder, expand, grow
from biomorphs.decoders.turtle_decoding import DrawOp, DrawOpKind, TurtleInterpreter, render
from biomorphs.ec.bracket_locator import Abandoned, BracketPairLocator, Matched
from biomorphs.ec.generators import BiomorphFactory, generate_random_genome
from biomorphs.ec.genotypes.biomorph.biomorph_genome import BiomorphGenome, Rule
from biomorphs.ec.mutations import BiomorphMutator, mutate

__all__ = [
    "Abandoned",
    "BiomorphFactory",
    "BiomorphGenome",
    "BiomorphMutator",
    "BracketPairLocator",
    "DrawOp",
    "DrawOpKind",
    "LSystemDecoder",
    "Matched",
    "Rule",
    "TurtleInterpreter",
    "expand",
    "generate_random_genome",
    "grow",
    "mutate",
    "render",
]
