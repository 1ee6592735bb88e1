"""Performance benchmarks for arbor.

This package contains microbenchmarks for the hot paths of the library:
heap operations and the three tree strategies on random graphs.
"""
