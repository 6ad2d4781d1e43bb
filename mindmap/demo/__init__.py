"""Offline demo maps."""

from mindmap.demo.mock_map import build_mock_tree, generate_mock_document

__all__ = ["build_mock_tree", "generate_mock_document"]
