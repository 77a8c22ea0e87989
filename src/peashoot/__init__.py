"""peashoot: garden-planning domain schemas, value objects and tooling."""

__version__ = "0.1.0"
