"""Source data and build scripts for the countries table."""
