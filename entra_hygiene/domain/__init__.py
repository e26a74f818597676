"""Domain layer - Pure model of directory hygiene checks."""
