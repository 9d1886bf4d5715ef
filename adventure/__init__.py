"""Console adventure game built around a single character."""
