# statepath/core/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Core conversions between string paths, nested state values, path sets and
state-node traversals.

Dependencies flow leaves first:
- paths: split/join delimited strings
- values: nested value <-> path set, and normalization of any accepted input
- traversal: nested value resolved against a state-node tree
"""
