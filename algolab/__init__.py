"""Classic algorithms: sorting, breadth-first traversal, subset sum and maximum flow."""

__version__ = "0.1.0"

__all__ = ["dags", "graph", "network_flow", "sorting", "subset_sum", "traversal"]