"""Public types and helpers shared by the stack and the renderer."""
