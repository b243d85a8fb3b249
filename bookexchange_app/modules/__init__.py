"""Feature modules of the Book Exchange app."""
