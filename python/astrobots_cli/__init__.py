"""Terminal frontend for the astronaut-and-robots puzzle."""
