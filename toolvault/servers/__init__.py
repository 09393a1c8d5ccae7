"""Server surfaces for the tool vault."""
