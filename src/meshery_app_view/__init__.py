"""View applications managed by a Meshery server."""
