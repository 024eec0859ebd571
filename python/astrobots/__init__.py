"""Astronaut-and-robots sliding puzzle: state model, solver and generator."""
