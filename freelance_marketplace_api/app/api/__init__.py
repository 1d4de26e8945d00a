"""HTTP routes for the marketplace API."""
