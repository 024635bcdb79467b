"""Configuration: defaults, YAML/env hierarchy and validated options."""
