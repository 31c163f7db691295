"""Domain layer: value objects (enums) and entities (pydantic models)."""
