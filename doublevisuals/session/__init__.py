"""Per-visitor session runtime: events, scheduling and the session object."""
