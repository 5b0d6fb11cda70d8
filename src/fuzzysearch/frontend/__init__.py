"""Command line and Flask front ends on top of fuzzysearch.Engine."""
