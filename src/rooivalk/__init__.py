"""Rooivalk Discord assistant."""
