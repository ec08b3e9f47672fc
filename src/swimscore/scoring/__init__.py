"""Swim suitability scoring: validation, sub-scorers, aggregation and advice."""

from swimscore.scoring.swim import compute_swim_score
from swimscore.scoring.validate import parse_inputs, validate_inputs

__all__ = ["compute_swim_score", "parse_inputs", "validate_inputs"]
