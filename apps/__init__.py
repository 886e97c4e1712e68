"""Domain applications of the hotel booking project."""
