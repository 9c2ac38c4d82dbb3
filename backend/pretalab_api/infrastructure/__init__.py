"""Infrastructure — database, document stores, text generation clients, logging."""
