"""Classic data structures and algorithms: recursion, stacks, queues, heaps, graphs, trees, matrices and grading."""

__version__ = "0.1.0"