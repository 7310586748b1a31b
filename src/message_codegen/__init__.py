"""Schema-driven message struct generator with validation directive synthesis."""
