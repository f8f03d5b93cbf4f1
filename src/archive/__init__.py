"""Archive input resolution, naming, packaging and orchestration."""
