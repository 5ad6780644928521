"""ngjump - heuristic go-to-definition for AngularJS-style JavaScript."""

__version__ = "0.1.0"
