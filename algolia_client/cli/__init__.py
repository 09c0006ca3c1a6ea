"""Command line interface for the Algolia client."""
