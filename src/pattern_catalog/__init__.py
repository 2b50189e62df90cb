"""Catalog of design pattern demonstrations and the harness that runs them."""
