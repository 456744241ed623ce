"""Request-to-output rendering pipeline."""
