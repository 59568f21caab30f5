"""Command-line front-end for the ForSure formatter and validator."""
