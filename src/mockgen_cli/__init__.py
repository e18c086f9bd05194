"""go-mockgen-tool command-line interface."""
