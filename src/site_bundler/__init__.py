"""Static marketing site build pipeline, dev server and contact relay."""
