"""HTTP API for File Diff Finder."""
