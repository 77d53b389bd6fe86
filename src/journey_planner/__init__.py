"""Journey planner client: itinerary normalization and live journey tracking."""
