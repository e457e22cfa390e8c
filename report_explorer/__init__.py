"""Report explorer: synthetic report data, aggregation and treemap layout."""
