"""Cache adapters backing the favicon record store."""
