"""smartfield command line interface."""
