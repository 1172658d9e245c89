"""Core logic for recents: path resolution, metadata and operations."""
