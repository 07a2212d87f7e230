"""Core types, errors and chart building for slicewise."""
