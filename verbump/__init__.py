"""Release helper that rewrites a version literal across a fixed set of files."""
