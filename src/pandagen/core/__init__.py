"""Scaffold engine core."""
