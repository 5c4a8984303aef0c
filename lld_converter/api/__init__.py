"""Transport-neutral request handlers for the HTTP entrypoints."""
