"""Command-line tools for pyfroniusmodbus."""
