"""Core of the client: domain, envelopes, mapping, pagination and services."""
