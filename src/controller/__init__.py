"""Controller API access: uploads and function lookups."""
