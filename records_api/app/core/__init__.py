"""Configuration, logging, error taxonomy and the JSON document store."""
