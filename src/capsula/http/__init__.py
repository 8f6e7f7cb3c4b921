"""HTTP primitives — immutable Request, chainable Response, case-insensitive Headers."""
