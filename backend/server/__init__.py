"""Server — host-side wiring: configuration, logging and the command line."""
