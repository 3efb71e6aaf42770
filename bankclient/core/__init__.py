"""Core building blocks: configuration, constants, enums, errors, Result types."""
