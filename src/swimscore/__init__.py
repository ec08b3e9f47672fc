"""SwimScore: explainable swim suitability scoring."""

__version__ = "0.1.0"
