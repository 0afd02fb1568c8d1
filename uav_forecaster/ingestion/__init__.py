"""
Ingestion layer — turning forecast files into ``HourlyRecord`` sequences.

Submodules:
  record_builder — icing / wind-shear / safety derivation from raw observations
  forecast_file  — JSON file loader with batched validation errors
"""
