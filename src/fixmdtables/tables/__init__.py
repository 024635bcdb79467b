"""Table alignment engine: classifiers, row codec, compensation and scanning."""
