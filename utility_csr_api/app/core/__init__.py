"""Configuration, logging, database and error handling."""
