"""Employee directory service: in-memory employee CRUD behind a uniform error pipeline."""
