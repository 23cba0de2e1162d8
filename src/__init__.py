"""Word-grid puzzle engine."""
