"""Configuration and resource models for a Kubernetes image-cleanup controller: durations, quantities, versioned EraserConfig schemas, a kind registry and defaults."""

__version__ = "1.1.0"