"""Application layer: resolution, graph construction, stratification, output."""
