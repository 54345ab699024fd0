"""AI travel guide service: structured itinerary and flight table editing."""
