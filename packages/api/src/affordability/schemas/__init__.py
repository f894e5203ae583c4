# This project was developed with assistance from AI tools.
"""Request, response and display schemas for the affordability engine."""
