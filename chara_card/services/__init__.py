"""Character card services."""
