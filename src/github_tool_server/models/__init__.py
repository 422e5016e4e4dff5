# Domain models
# Repository records and per-tool input schemas
