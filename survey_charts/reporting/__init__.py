"""Chart layout, styling and rendering."""
