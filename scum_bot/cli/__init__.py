"""Console interface for the dice bot."""
