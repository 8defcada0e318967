"""Tools for social-network XML documents: tag checking and repair, XML to JSON conversion, follower graphs, post search and Huffman tree nodes."""

__version__ = "0.1.0"

__all__ = ["error_detect", "graph", "huffman", "search", "social", "xml_to_json"]