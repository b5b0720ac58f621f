"""Core building blocks: model providers, factories and heuristic extraction."""
