"""Command line interface for cooknote."""
