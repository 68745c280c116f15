"""Infrastructure Layer — database sessions, the SQL todo store, logging setup."""
