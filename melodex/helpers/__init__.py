"""Shared helpers: exceptions, logging, time utilities and DTOs."""
