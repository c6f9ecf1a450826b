"""Filter catalog, parameter mapping and the processing pipeline."""
