"""Cross-cutting request protection (rate limiting)."""
