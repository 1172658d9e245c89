"""Bundled data files for recents."""
