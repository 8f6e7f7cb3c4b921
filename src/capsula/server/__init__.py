"""Serving — ASGI request pipeline, default error catcher, and pounce adapters."""
