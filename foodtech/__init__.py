"""Food-technology class management service."""
