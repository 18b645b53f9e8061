"""Core request pipeline: credentials, URL composition, signing, transport and
response classification.

This module has no dependency on any CLI or configuration file format. Callers
push credentials in through outside_in.core.credentials (or
outside_in.config.load_credentials_from_env) before the first request.
"""
