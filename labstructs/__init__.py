"""Queues, a max-heap, search trees, a B+ tree, graphs, expression notation,
sparse matrices, Huffman coding and tic-tac-toe minimax in plain Python."""

__version__ = "0.1.0"