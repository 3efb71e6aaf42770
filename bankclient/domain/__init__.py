"""Domain layer: banking value objects, validators, errors and protocols."""
