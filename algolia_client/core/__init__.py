"""Core building blocks: settings, exceptions and API schemas."""
