"""
temporal_utils core package.

This package provides:
- Pure date/time helpers (`temporal_utils.utils`): UTC conversions, min/max
  selection with sentinel defaults, inclusive range checks, day and month
  boundaries
- An injectable clock capability (`temporal_utils.utils.clock`)
- A minimal Typer-based CLI (`temporal_utils.cli`) for inspecting values

Configuration:
- Shared sentinels and constants live in `temporal_utils.global_config`.
"""
