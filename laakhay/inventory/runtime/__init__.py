"""Runtime layer: paging engine and REST transport."""
