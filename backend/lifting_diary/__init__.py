"""Lifting diary: workout log API."""
