"""HTTP surface serving the scrape endpoint."""
