"""Application layer: lesson catalog, lesson service and conformance checks."""
