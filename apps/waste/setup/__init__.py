"""Setup - configuration, logging, dependency wiring."""
