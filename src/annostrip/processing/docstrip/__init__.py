"""Per-mode comment, docstring and appendix strippers."""
