"""Services: the query engine, intent routing and view rendering."""
