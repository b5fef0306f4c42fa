"""Adapters – query backends for concrete persistence technologies."""
