"""Recipe loading and schema validation."""
