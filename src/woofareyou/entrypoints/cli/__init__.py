"""Command-line interface for WoofAreYou."""
