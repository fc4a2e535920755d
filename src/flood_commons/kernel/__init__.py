"""Kernel – error hierarchy shared by every flood_commons module."""
