"""HTTP layer: routers, request dependencies and error translation."""
