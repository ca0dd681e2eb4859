"""Static lookup tables and menu layout."""
