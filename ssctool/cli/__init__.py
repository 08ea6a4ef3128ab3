"""Command-line interface for ssc-tool."""
