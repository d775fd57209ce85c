"""
Gita reader core package.

This package holds the local state and content-indexing layer of a chapter
and verse reader. It exposes dataclasses for the content collections, a
cross-referencing content index, a typed key-value preference store with
in-memory and SQL backends, the reading-state store built on it, derived
views (daily verse, progress, neighbors, search), a navigation state machine
and a session object that wires them together.
"""
